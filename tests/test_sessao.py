import pytest
from django.contrib.auth import get_user_model
from django.test import RequestFactory
from django.urls import reverse

from core import sessao
from core.exceptions import ErroValidacao
from core.models import PapelUsuario
from core.tokens import usuario_da_requisicao

from .dados import SENHA

pytestmark = pytest.mark.django_db


# ==============================================================================
# ContextoSessao / middleware
# ==============================================================================

def test_contexto_anonimo():
    from django.contrib.auth.models import AnonymousUser

    contexto = sessao.ContextoSessao(AnonymousUser())

    assert contexto.usuario is None
    assert contexto.papel is None
    assert contexto.carregando is True
    assert not contexto.autenticado


def test_contexto_resolve_papel(admin_user):
    contexto = sessao.ContextoSessao(admin_user)
    assert contexto.papel is None

    assert contexto.resolver_papel() == 'admin'
    assert contexto.carregando is False
    assert contexto.pode('admin')


def test_contexto_sem_registro_de_papel(usuario_sem_papel):
    contexto = sessao.ContextoSessao(usuario_sem_papel)
    contexto.resolver_papel()

    assert contexto.papel is None
    assert contexto.pode()
    assert not contexto.pode('associado')


def test_middleware_publica_contexto_com_papel_resolvido(associado_client):
    response = associado_client.get(reverse('dashboard'))

    contexto = response.wsgi_request.sessao
    assert contexto.autenticado
    assert contexto.papel == 'associado'
    assert contexto.carregando is False


# ==============================================================================
# entrar / cadastrar / sair
# ==============================================================================

def _request_com_sessao():
    from django.contrib.sessions.backends.db import SessionStore

    request = RequestFactory().post('/')
    request.session = SessionStore()
    return request


@pytest.mark.parametrize('email, senha', [('', SENHA), ('admin@clube.com', '12345'), ('admin@clube.com', None)])
def test_entrar_valida_antes_de_autenticar(admin_user, email, senha):
    with pytest.raises(ErroValidacao):
        sessao.entrar(_request_com_sessao(), email, senha)


def test_entrar_normaliza_email_e_guarda_token(admin_user):
    request = _request_com_sessao()

    erro = sessao.entrar(request, '  ADMIN@Clube.com ', SENHA)

    assert erro is None
    assert request.sessao.papel == 'admin'
    token = request.session[sessao.CHAVE_TOKEN_SESSAO]
    api_request = RequestFactory().post('/api/usuarios/criar/', HTTP_AUTHORIZATION=f"Bearer {token}")
    assert usuario_da_requisicao(api_request) == admin_user


def test_entrar_com_senha_errada_retorna_mensagem(admin_user):
    erro = sessao.entrar(_request_com_sessao(), 'admin@clube.com', 'senhaerrada')
    assert erro == 'Credenciais inválidas. Verifique seu email e senha.'


def test_cadastrar_cria_associado_sem_logar(client):
    erro = sessao.cadastrar(' Novo@Clube.com ', 'abcdef', '  Fulano de Tal ')

    assert erro is None
    user = get_user_model().objects.get(email='novo@clube.com')
    assert user.nome == 'Fulano de Tal'
    assert PapelUsuario.objects.get(usuario=user).papel == 'associado'


def test_cadastrar_email_duplicado(associado_user):
    erro = sessao.cadastrar('socio@clube.com', 'abcdef', 'Outro')
    assert erro == 'Já existe uma conta com este email.'


def test_cadastrar_senha_curta():
    with pytest.raises(ErroValidacao):
        sessao.cadastrar('a@b.com', '123', 'Curta')


def test_tela_de_login_autentica_e_redireciona(client, admin_user):
    response = client.post(reverse('login'), {'email': 'admin@clube.com', 'senha': SENHA})

    assert response.status_code == 302
    assert response.url == reverse('dashboard')


def test_tela_de_cadastro_nao_autentica(client):
    response = client.post(reverse('cadastro'), {'nome': 'Novo', 'email': 'novo@clube.com', 'senha': 'abcdef'})

    assert response.status_code == 302
    assert response.url == reverse('login')
    assert '_auth_user_id' not in client.session


def test_logout_limpa_sessao(admin_client):
    response = admin_client.post(reverse('logout'))

    assert response.status_code == 302
    assert '_auth_user_id' not in admin_client.session
    assert admin_client.get(reverse('dashboard')).url == reverse('login')


def test_logout_revoga_token_bearer(client, admin_user):
    client.post(reverse('login'), {'email': 'admin@clube.com', 'senha': SENHA})
    token = client.session[sessao.CHAVE_TOKEN_SESSAO]

    client.post(reverse('logout'))

    api_request = RequestFactory().post('/api/usuarios/criar/', HTTP_AUTHORIZATION=f"Bearer {token}")
    assert usuario_da_requisicao(api_request) is None

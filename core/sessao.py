"""
Sessão e papel do usuário.

Cada requisição recebe um ContextoSessao montado pelo SessaoMiddleware:
primeiro a identidade, depois a busca do papel, e só então o contexto é
publicado em request.sessao. Views, decorators e templates leem daí.
"""
import logging

from django.conf import settings
from django.contrib.auth import authenticate, get_user_model, login, logout
from django.db import transaction

from .exceptions import ErroValidacao
from .models import PAPEL_ASSOCIADO, PapelUsuario
from .permissoes import pode_acessar
from .tokens import emitir_token, revogar_token

logger = logging.getLogger(__name__)

CHAVE_TOKEN_SESSAO = 'token_acesso'


class ContextoSessao:
    """Identidade atual + papel resolvido."""

    def __init__(self, usuario=None):
        if usuario is not None and not usuario.is_authenticated:
            usuario = None
        self.usuario = usuario
        self.papel = None
        self.carregando = True

    @property
    def autenticado(self):
        return self.usuario is not None

    def resolver_papel(self):
        """Busca o registro de papel da identidade. Enquanto não resolve, papel é None."""
        if self.usuario is None:
            self.papel = None
        else:
            registro = PapelUsuario.objects.filter(usuario=self.usuario).values_list('papel', flat=True).first()
            self.papel = registro
        self.carregando = False
        return self.papel

    def limpar(self):
        self.usuario = None
        self.papel = None

    def pode(self, requisito=None):
        return self.autenticado and pode_acessar(self.papel, requisito)


class SessaoMiddleware:
    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        contexto = ContextoSessao(getattr(request, 'user', None))
        contexto.resolver_papel()
        request.sessao = contexto
        return self.get_response(request)


def normalizar_email(email):
    return (email or '').strip().lower()


def _validar_credenciais(email, senha, msg_senha):
    if not email:
        raise ErroValidacao('Email é obrigatório')
    if len(senha or '') < settings.SENHA_TAMANHO_MINIMO:
        raise ErroValidacao(msg_senha)


def entrar(request, email, senha):
    """
    Faz login. Erros de validação sobem como ErroValidacao antes de qualquer
    tentativa de autenticação; falha de credencial retorna a mensagem de erro.
    Retorna None em caso de sucesso.
    """
    email = normalizar_email(email)
    senha = senha or ''
    _validar_credenciais(email, senha, 'Senha inválida (mínimo 6 caracteres)')

    user = authenticate(request, username=email, password=senha)
    if user is None:
        return 'Credenciais inválidas. Verifique seu email e senha.'

    login(request, user)
    request.session[CHAVE_TOKEN_SESSAO] = emitir_token(user)

    contexto = ContextoSessao(user)
    contexto.resolver_papel()
    request.sessao = contexto
    logger.info(f"Login realizado: {email} (papel: {contexto.papel})")
    return None


def cadastrar(email, senha, nome):
    """
    Cria a conta com papel 'associado'. Não autentica: o usuário entra
    depois pela tela de login. Retorna None ou a mensagem de erro.
    """
    email = normalizar_email(email)
    senha = senha or ''
    nome = (nome or '').strip()
    _validar_credenciais(email, senha, 'Senha deve ter no mínimo 6 caracteres')

    User = get_user_model()
    if User.objects.filter(email=email).exists():
        return 'Já existe uma conta com este email.'

    with transaction.atomic():
        user = User.objects.create_user(username=email, email=email, password=senha, nome=nome)
        PapelUsuario.objects.create(usuario=user, papel=PAPEL_ASSOCIADO)

    logger.info(f"Conta criada: {email}")
    return None


def sair(request):
    if request.user.is_authenticated:
        revogar_token(request.user)
    contexto = getattr(request, 'sessao', None)
    if contexto is not None:
        contexto.limpar()
    logout(request)

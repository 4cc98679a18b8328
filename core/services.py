"""Gestão dos usuários do sistema (perfil + papel)."""
import logging

from django.conf import settings
from django.contrib.auth import get_user_model
from django.core.exceptions import ValidationError
from django.db import DatabaseError, transaction

from .exceptions import ErroAtribuicaoPapel, ErroAutorizacao, ErroNaoEncontrado, ErroValidacao
from .models import PAPEL_ADMIN, PAPEL_ASSOCIADO, PapelUsuario
from .repositorio import mensagem_de
from .sessao import normalizar_email

logger = logging.getLogger(__name__)


def verificar_admin(usuario, mensagem="Apenas administradores podem gerenciar usuários"):
    if usuario is None or not PapelUsuario.objects.filter(usuario=usuario, papel=PAPEL_ADMIN).exists():
        raise ErroAutorizacao(mensagem)


def listar_usuarios():
    """Perfis ordenados por nome, cada um com o atributo .papel (padrão: associado)."""
    User = get_user_model()
    usuarios = list(User.objects.order_by('nome', 'email'))

    papeis = {}
    for user_id, papel in PapelUsuario.objects.values_list('usuario_id', 'papel'):
        papeis.setdefault(user_id, papel)

    for usuario in usuarios:
        usuario.papel = papeis.get(usuario.pk, PAPEL_ASSOCIADO)
    return usuarios


def _obter_usuario(usuario_id):
    User = get_user_model()
    try:
        return User.objects.get(pk=usuario_id)
    except (User.DoesNotExist, ValueError, TypeError):
        raise ErroNaoEncontrado("Usuário não encontrado")


def _validar_papel(papel):
    registro = PapelUsuario(papel=papel)
    try:
        registro.clean_fields(exclude=['usuario'])
    except ValidationError as e:
        raise ErroValidacao(mensagem_de(e))


def criar_usuario(email, senha, nome, papel):
    """
    Cria a conta (já confirmada/ativa) e grava o papel. Se o papel não puder
    ser gravado, a conta recém-criada é apagada e sobe ErroAtribuicaoPapel.
    """
    if not email or not senha or not nome or not papel:
        raise ErroValidacao("Campos obrigatórios ausentes: email, password, nome, role")
    if not all(isinstance(campo, str) for campo in (email, senha, nome, papel)):
        raise ErroValidacao("Os campos email, password, nome e role devem ser texto")

    email = normalizar_email(email)
    if len(senha) < settings.SENHA_TAMANHO_MINIMO:
        raise ErroValidacao("A senha deve ter no mínimo 6 caracteres")

    User = get_user_model()
    if User.objects.filter(email=email).exists():
        raise ErroValidacao("Já existe um usuário cadastrado com este email")

    user = User.objects.create_user(
        username=email, email=email, password=senha, nome=nome.strip(), is_active=True
    )

    try:
        registro = PapelUsuario(usuario=user, papel=papel)
        registro.full_clean()
        registro.save()
    except (ValidationError, DatabaseError) as e:
        logger.error(f"Falha ao gravar papel '{papel}' para {email}: {e}")
        try:
            user.delete()
        except DatabaseError:
            logger.exception(f"Falha ao desfazer a criação do usuário {email}")
        raise ErroAtribuicaoPapel("Falha ao atribuir o papel. A criação do usuário foi desfeita.")

    logger.info(f"Usuário criado: {email} ({papel})")
    return user


def atualizar_usuario(usuario_id, nome=None, papel=None, ativo=None):
    user = _obter_usuario(usuario_id)

    if nome is not None and not isinstance(nome, str):
        raise ErroValidacao("O campo nome deve ser texto")
    if papel and not isinstance(papel, str):
        raise ErroValidacao("O campo role deve ser texto")

    campos = []
    if nome is not None:
        user.nome = nome.strip()
        campos.append('nome')
    if ativo is not None:
        user.is_active = bool(ativo)
        campos.append('is_active')

    if papel:
        _validar_papel(papel)

    with transaction.atomic():
        if campos:
            user.save(update_fields=campos)

        if papel:
            # Remove o papel atual e grava o novo (delete + insert, não upsert)
            PapelUsuario.objects.filter(usuario=user).delete()
            PapelUsuario.objects.create(usuario=user, papel=papel)

    logger.info(f"Usuário atualizado: {user.email} (campos={campos}, papel={papel})")
    return user


def excluir_usuario(solicitante, usuario_id):
    if str(usuario_id) == str(solicitante.pk):
        raise ErroValidacao("Você não pode excluir seu próprio usuário")

    user = _obter_usuario(usuario_id)
    email = user.email
    user.delete()
    logger.info(f"Usuário excluído: {email} (por {solicitante.email})")

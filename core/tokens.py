"""Token Bearer dos endpoints de gestão de usuários (rest_framework.authtoken)."""
import logging
from datetime import timedelta

from django.conf import settings
from django.utils import timezone
from rest_framework import exceptions
from rest_framework.authentication import TokenAuthentication
from rest_framework.authtoken.models import Token

logger = logging.getLogger(__name__)


def token_expirado(token):
    return timezone.now() - token.created > timedelta(seconds=settings.TOKEN_ACESSO_VALIDADE)


class BearerTokenAuthentication(TokenAuthentication):
    """TokenAuthentication com a palavra 'Bearer' e prazo de validade."""
    keyword = 'Bearer'

    def authenticate_credentials(self, key):
        user, token = super().authenticate_credentials(key)
        if token_expirado(token):
            token.delete()
            raise exceptions.AuthenticationFailed('Token expirado.')
        return user, token


def emitir_token(usuario):
    token, criado = Token.objects.get_or_create(user=usuario)
    if not criado and token_expirado(token):
        token.delete()
        token = Token.objects.create(user=usuario)
    return token.key


def revogar_token(usuario):
    Token.objects.filter(user=usuario).delete()


def usuario_da_requisicao(request):
    """Usuário ativo dono do 'Authorization: Bearer <token>', ou None."""
    try:
        resultado = BearerTokenAuthentication().authenticate(request)
    except exceptions.AuthenticationFailed as e:
        logger.info(f"Token Bearer recusado: {e.detail}")
        return None
    return resultado[0] if resultado else None

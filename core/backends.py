import logging

from django.contrib.auth.backends import ModelBackend
from django.contrib.auth import get_user_model

logger = logging.getLogger(__name__)


class EmailBackend(ModelBackend):
    """Autentica pelo email (sem diferenciar maiúsculas)."""

    def authenticate(self, request, username=None, password=None, **kwargs):
        email = kwargs.get('email', username)
        if not email or password is None:
            return None

        User = get_user_model()

        # 1. Tenta achar o usuário
        user = User.objects.filter(email__iexact=email.strip()).order_by('pk').first()
        if user is None:
            logger.info(f"Login recusado: email '{email}' não cadastrado.")
            User().set_password(password)  # mesmo custo de hash de um email existente
            return None

        # 2. Testa a Senha
        if not user.check_password(password):
            logger.info(f"Login recusado: senha incorreta para '{email}'.")
            return None

        # 3. Testa is_active
        if not self.user_can_authenticate(user):
            logger.info(f"Login recusado: usuário '{email}' inativo.")
            return None

        return user

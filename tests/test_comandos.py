from io import StringIO

import pytest
from django.contrib.auth import get_user_model
from django.core.management import call_command
from django.core.management.base import CommandError

from core.models import PapelUsuario

pytestmark = pytest.mark.django_db


def test_criar_admin_novo():
    saida = StringIO()

    call_command('criar_admin', email='Chefe@Clube.com', senha='abcdef', nome='Chefe', stdout=saida)

    user = get_user_model().objects.get(email='chefe@clube.com')
    assert user.check_password('abcdef')
    assert PapelUsuario.objects.get(usuario=user).papel == 'admin'
    assert '1 administrador(es)' in saida.getvalue()


def test_criar_admin_promove_existente(associado_user):
    call_command('criar_admin', email='socio@clube.com', stdout=StringIO())

    assert list(associado_user.papeis.values_list('papel', flat=True)) == ['admin']


def test_criar_admin_sem_senha_para_usuario_novo():
    with pytest.raises(CommandError):
        call_command('criar_admin', email='novo@clube.com', stdout=StringIO())


def test_criar_admin_com_senha_curta():
    with pytest.raises(CommandError):
        call_command('criar_admin', email='novo@clube.com', senha='123', stdout=StringIO())

"""Fixtures compartilhadas: usuários com papel, clientes logados e dados básicos."""
from datetime import date
from decimal import Decimal

import pytest
from django.contrib.auth import get_user_model
from django.core.cache import cache

from agenda_clube.models import Agendamento
from cadastros_clube.models import Associado
from core.models import PAPEL_ADMIN, PAPEL_ASSOCIADO, PapelUsuario
from core.tokens import emitir_token
from financeiro_clube.models import CategoriaConta, Lancamento

from .dados import SENHA, dados_associado


@pytest.fixture(autouse=True)
def _cache_limpo():
    cache.clear()
    yield
    cache.clear()

@pytest.fixture(autouse=True)
def _hash_rapido(settings):
    settings.PASSWORD_HASHERS = ['django.contrib.auth.hashers.MD5PasswordHasher']

def _criar_usuario(email, papel, nome):
    user = get_user_model().objects.create_user(username=email, email=email, password=SENHA, nome=nome)
    if papel:
        PapelUsuario.objects.create(usuario=user, papel=papel)
    return user

@pytest.fixture
def admin_user(db):
    return _criar_usuario('admin@clube.com', PAPEL_ADMIN, 'Admin do Clube')

@pytest.fixture
def associado_user(db):
    return _criar_usuario('socio@clube.com', PAPEL_ASSOCIADO, 'Sócio')

@pytest.fixture
def usuario_sem_papel(db):
    return _criar_usuario('semrole@clube.com', None, 'Sem Papel')

@pytest.fixture
def admin_client(client, admin_user):
    client.force_login(admin_user)
    return client

@pytest.fixture
def associado_client(client, associado_user):
    client.force_login(associado_user)
    return client

@pytest.fixture
def bearer_admin(admin_user):
    return f"Bearer {emitir_token(admin_user)}"

@pytest.fixture
def bearer_associado(associado_user):
    return f"Bearer {emitir_token(associado_user)}"

@pytest.fixture
def associado(db):
    return Associado.objects.create(**dados_associado())

@pytest.fixture
def categoria_receita(db):
    return CategoriaConta.objects.create(nome='Aluguel', tipo='receita')

@pytest.fixture
def categoria_despesa(db):
    return CategoriaConta.objects.create(nome='Energia', tipo='despesa')

@pytest.fixture
def lancamento_aluguel(categoria_receita):
    return Lancamento.objects.create(
        data=date(2025, 3, 10), descricao='Aluguel do salão', valor=Decimal('500.00'),
        tipo='receita', categoria=categoria_receita,
    )

@pytest.fixture
def agendamento(db):
    return Agendamento.objects.create(data=date(2025, 4, 12), nome_responsavel='João Souza', contato='(19) 98888-0000')

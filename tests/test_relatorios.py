from datetime import date
from decimal import Decimal
from io import BytesIO

import openpyxl
import pytest
from django.urls import reverse
from django.utils import timezone

from cadastros_clube.models import Associado
from financeiro_clube.models import Lancamento
from relatorios_clube.filtros import filtrar_associados, filtros_financeiro

from .dados import dados_associado

pytestmark = pytest.mark.django_db


@pytest.fixture
def associados(db):
    return [
        Associado.objects.create(**dados_associado(nome_completo='Ana Souza', data_nascimento=date(1990, 1, 1))),
        Associado.objects.create(**dados_associado(nome_completo='Bruno Lima', data_nascimento=date(1985, 6, 15), status='inativo')),
        Associado.objects.create(**dados_associado(nome_completo='Carla Dias', data_nascimento=date(2000, 12, 31))),
    ]


# ==============================================================================
# Filtros
# ==============================================================================

def test_filtrar_associados_por_status_e_nascimento(associados):
    ana, bruno, carla = associados

    assert filtrar_associados(associados, 'ativo') == [ana, carla]
    assert filtrar_associados(associados, 'inativo') == [bruno]
    assert filtrar_associados(associados, 'todos', date(1985, 6, 15), date(1990, 1, 1)) == [ana, bruno]
    assert filtrar_associados(associados, 'todos', date(2000, 1, 1), date(1980, 1, 1)) == []


def test_filtro_financeiro_padrao_e_ano_corrente():
    filtros = filtros_financeiro({}, hoje=date(2025, 7, 4))

    assert filtros == {'inicio': date(2025, 1, 1), 'fim': date(2025, 12, 31), 'tipo': 'todos'}


def test_filtro_financeiro_ignora_valores_invalidos():
    filtros = filtros_financeiro({'inicio': '2025-02-30', 'fim': 'ontem', 'tipo': 'outro'}, hoje=date(2025, 7, 4))

    assert filtros == {'inicio': date(2025, 1, 1), 'fim': date(2025, 12, 31), 'tipo': 'todos'}


# ==============================================================================
# Páginas
# ==============================================================================

def test_relatorio_associados(admin_client, associados):
    response = admin_client.get(reverse('relatorio_associados'), {'status': 'inativo'})

    assert response.status_code == 200
    assert [a.nome_completo for a in response.context['associados']] == ['Bruno Lima']


def test_relatorio_financeiro_cenario_aluguel(admin_client, lancamento_aluguel, categoria_despesa):
    Lancamento.objects.create(data=date(2025, 3, 15), descricao='Luz', valor=Decimal('90.00'), tipo='despesa', categoria=categoria_despesa)

    response = admin_client.get(reverse('relatorio_financeiro'), {'inicio': '2025-03-01', 'fim': '2025-03-31', 'tipo': 'receita'})

    resumo = response.context['resumo']
    assert response.context['lancamentos'] == [lancamento_aluguel]
    assert resumo.receitas == Decimal('500.00')
    assert resumo.despesas == Decimal('0.00')
    assert resumo.saldo == Decimal('500.00')


def test_relatorio_financeiro_sem_filtro_usa_ano_corrente(admin_client, categoria_receita):
    hoje = timezone.localdate()
    deste_ano = Lancamento.objects.create(data=hoje, descricao='Atual', valor=Decimal('10'), tipo='receita', categoria=categoria_receita)
    Lancamento.objects.create(data=date(hoje.year - 1, 6, 1), descricao='Antigo', valor=Decimal('10'), tipo='receita', categoria=categoria_receita)

    response = admin_client.get(reverse('relatorio_financeiro'))

    assert response.context['lancamentos'] == [deste_ano]


def test_relatorios_sao_apenas_para_admin(associado_client):
    for nome in ('relatorio_associados', 'relatorio_financeiro', 'exportar_financeiro_excel'):
        response = associado_client.get(reverse(nome))
        assert response.status_code == 302
        assert response.url == reverse('dashboard')


# ==============================================================================
# Exportações
# ==============================================================================

def test_exportar_associados_excel(admin_client, associados):
    response = admin_client.get(reverse('exportar_associados_excel'), {'status': 'ativo'})

    assert response['Content-Type'].startswith('application/vnd.openxmlformats')
    ws = openpyxl.load_workbook(BytesIO(response.content)).active
    linhas = list(ws.iter_rows(values_only=True))
    assert linhas[0][0] == 'Nome'
    assert [l[0] for l in linhas[1:]] == ['Ana Souza', 'Carla Dias']


def test_exportar_financeiro_excel(admin_client, lancamento_aluguel, categoria_despesa):
    Lancamento.objects.create(data=date(2025, 3, 15), descricao='Luz', valor=Decimal('90.00'), tipo='despesa', categoria=categoria_despesa)

    response = admin_client.get(reverse('exportar_financeiro_excel'), {'inicio': '2025-03-01', 'fim': '2025-03-31'})

    assert 'Relatorio_Financeiro_20250301_20250331.xlsx' in response['Content-Disposition']
    ws = openpyxl.load_workbook(BytesIO(response.content)).active
    linhas = [l for l in ws.iter_rows(values_only=True) if any(v not in (None, '') for v in l)]
    assert linhas[0] == ('Data', 'Descrição', 'Categoria', 'Tipo', 'Valor')
    assert [l[1] for l in linhas[1:3]] == ['Luz', 'Aluguel do salão']
    assert linhas[2][4] == 500
    assert linhas[1][4] == -90
    assert linhas[-1][3:] == ('Saldo', 410)


def test_exportar_financeiro_pdf(admin_client, lancamento_aluguel):
    response = admin_client.get(reverse('exportar_financeiro_pdf'), {'inicio': '2025-01-01', 'fim': '2025-12-31'})

    assert response.status_code == 200
    assert response['Content-Type'] == 'application/pdf'
    assert response.content.startswith(b'%PDF')

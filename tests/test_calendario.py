from datetime import date
from types import SimpleNamespace

import pytest

from agenda_clube import calendario


def test_mes_de_30_dias_comecando_na_quarta():
    # Abril/2026: dia 1 é quarta-feira
    grade = calendario.gerar_grade(2026, 4)

    assert grade[:3] == [None, None, None]
    dias = [d for d in grade if d is not None]
    assert len(dias) == 30
    assert len(grade) == 33
    assert dias[0] == date(2026, 4, 1)
    assert dias[-1] == date(2026, 4, 30)


def test_mes_comecando_no_domingo_nao_tem_celulas_vazias():
    # Junho/2025 começa num domingo
    assert calendario.gerar_grade(2025, 6)[0] == date(2025, 6, 1)


def test_fevereiro_bissexto():
    dias = [d for d in calendario.gerar_grade(2024, 2) if d]
    assert len(dias) == 29


def test_em_semanas_completa_a_ultima_linha():
    semanas = calendario.em_semanas(calendario.gerar_grade(2026, 4))

    assert len(semanas) == 5
    assert all(len(s) == 7 for s in semanas)
    assert semanas[-1][-1] is None


@pytest.mark.parametrize('referencia, direcao, esperado', [
    (date(2025, 1, 31), -1, date(2024, 12, 1)),
    (date(2025, 12, 15), 1, date(2026, 1, 1)),
    (date(2025, 3, 31), 1, date(2025, 4, 1)),
    (date(9999, 12, 10), 1, date(9999, 12, 1)),
    (date(1, 1, 20), -1, date(1, 1, 1)),
])
def test_navegar_mes(referencia, direcao, esperado):
    assert calendario.navegar_mes(referencia, direcao) == esperado


def test_duas_reservas_no_mesmo_dia_vale_a_primeira():
    dia = date(2025, 4, 12)
    primeira = SimpleNamespace(data=dia, nome_responsavel='Primeira')
    segunda = SimpleNamespace(data=dia, nome_responsavel='Segunda')

    assert calendario.buscar_agendamento([primeira, segunda], dia) is primeira
    assert calendario.estado_dia([primeira, segunda], dia) == calendario.OCUPADO


def test_dia_sem_reserva_esta_disponivel():
    assert calendario.buscar_agendamento([], date(2025, 4, 12)) is None
    assert calendario.estado_dia([], date(2025, 4, 12)) == calendario.DISPONIVEL


@pytest.mark.parametrize('papel, estado, acoes', [
    ('admin', 'disponivel', ['criar']),
    ('associado', 'disponivel', []),
    (None, 'disponivel', []),
    ('admin', 'ocupado', ['visualizar', 'editar', 'excluir']),
    ('associado', 'ocupado', ['visualizar']),
    (None, 'ocupado', ['visualizar']),
])
def test_acoes_disponiveis(papel, estado, acoes):
    assert calendario.acoes_disponiveis(papel, estado) == acoes


def test_montar_mes_marca_ocupados_e_hoje():
    reserva = SimpleNamespace(data=date(2025, 4, 12), nome_responsavel='João')

    semanas = calendario.montar_mes(2025, 4, [reserva], hoje=date(2025, 4, 2))
    celulas = [c for s in semanas for c in s if c]

    ocupados = [c['data'] for c in celulas if c['estado'] == calendario.OCUPADO]
    assert ocupados == [date(2025, 4, 12)]
    assert [c['data'] for c in celulas if c['hoje']] == [date(2025, 4, 2)]


def test_proximos():
    hoje = date(2025, 4, 10)
    datas = [date(2025, 4, 9), date(2025, 4, 30), date(2025, 4, 10), date(2025, 4, 15), date(2025, 5, 1)]
    agendamentos = [SimpleNamespace(data=d) for d in datas]

    assert [a.data for a in calendario.proximos(agendamentos, hoje)] == [
        date(2025, 4, 10), date(2025, 4, 15), date(2025, 4, 30),
    ]

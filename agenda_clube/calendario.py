"""
Grade mensal da agenda e estado de cada dia (disponível/ocupado).

A semana começa no domingo. Tudo aqui trabalha sobre a lista de
agendamentos já carregada pelo repositório.
"""
import calendar
from datetime import date

from dateutil.relativedelta import relativedelta

from core.models import PAPEL_ADMIN
from core.permissoes import pode_acessar

DISPONIVEL = 'disponivel'
OCUPADO = 'ocupado'

ACAO_CRIAR = 'criar'
ACAO_VISUALIZAR = 'visualizar'
ACAO_EDITAR = 'editar'
ACAO_EXCLUIR = 'excluir'

NOMES_DIAS = ['Dom', 'Seg', 'Ter', 'Qua', 'Qui', 'Sex', 'Sáb']
NOMES_MESES = [
    '', 'Janeiro', 'Fevereiro', 'Março', 'Abril', 'Maio', 'Junho',
    'Julho', 'Agosto', 'Setembro', 'Outubro', 'Novembro', 'Dezembro',
]


def indice_domingo(dia):
    """Dia da semana com domingo = 0 (date.weekday() usa segunda = 0)."""
    return (dia.weekday() + 1) % 7


def gerar_grade(ano, mes):
    """Células vazias (None) até o dia 1 cair na coluna certa, depois um date por dia."""
    primeiro = date(ano, mes, 1)
    total_dias = calendar.monthrange(ano, mes)[1]

    grade = [None] * indice_domingo(primeiro)
    grade.extend(date(ano, mes, d) for d in range(1, total_dias + 1))
    return grade


def em_semanas(grade):
    semanas = []
    for i in range(0, len(grade), 7):
        semana = list(grade[i:i + 7])
        semana.extend([None] * (7 - len(semana)))
        semanas.append(semana)
    return semanas


def navegar_mes(referencia, direcao):
    """
    Primeiro dia do mês anterior (direcao=-1) ou seguinte (direcao=1).
    Nos limites do calendário (ano 1 e ano 9999) fica no próprio mês.
    """
    inicio = referencia.replace(day=1)
    try:
        return inicio + relativedelta(months=direcao)
    except ValueError:
        return inicio


def buscar_agendamento(agendamentos, dia):
    # Se houver mais de um na mesma data, vale o primeiro da lista
    return next((a for a in agendamentos if a.data == dia), None)


def estado_dia(agendamentos, dia):
    return OCUPADO if buscar_agendamento(agendamentos, dia) else DISPONIVEL


def acoes_disponiveis(papel, estado):
    admin = pode_acessar(papel, PAPEL_ADMIN)

    if estado == OCUPADO:
        acoes = [ACAO_VISUALIZAR]
        if admin:
            acoes += [ACAO_EDITAR, ACAO_EXCLUIR]
        return acoes

    return [ACAO_CRIAR] if admin else []


def montar_mes(ano, mes, agendamentos, hoje=None):
    """Semanas prontas para o template: cada célula é None ou um dict do dia."""
    semanas = []
    for semana in em_semanas(gerar_grade(ano, mes)):
        linha = []
        for dia in semana:
            if dia is None:
                linha.append(None)
                continue
            agendamento = buscar_agendamento(agendamentos, dia)
            linha.append({
                'data': dia,
                'agendamento': agendamento,
                'estado': OCUPADO if agendamento else DISPONIVEL,
                'hoje': dia == hoje,
            })
        semanas.append(linha)
    return semanas


def proximos(agendamentos, hoje, n=3):
    return sorted((a for a in agendamentos if a.data >= hoje), key=lambda a: a.data)[:n]

from datetime import date

from django.utils import timezone
from django.utils.dateparse import parse_date

from financeiro_clube import agregacao

STATUS_TODOS = 'todos'
STATUS_FILTRO = (STATUS_TODOS, 'ativo', 'inativo')


def _data(valor):
    try:
        return parse_date(valor) if valor else None
    except ValueError:
        return None


def filtrar_associados(associados, status=STATUS_TODOS, inicio=None, fim=None):
    """Status e faixa de data de nascimento [inicio, fim], inclusive."""
    if inicio and fim and inicio > fim:
        return []

    resultado = []
    for a in associados:
        if status and status != STATUS_TODOS and a.status != status:
            continue
        if inicio and a.data_nascimento < inicio:
            continue
        if fim and a.data_nascimento > fim:
            continue
        resultado.append(a)
    return resultado


def filtros_associados(params):
    status = params.get('status') or STATUS_TODOS
    if status not in STATUS_FILTRO:
        status = STATUS_TODOS
    return {
        'status': status,
        'inicio': _data(params.get('inicio')),
        'fim': _data(params.get('fim')),
    }


def filtros_financeiro(params, hoje=None):
    """Sem datas informadas, o período é o ano corrente inteiro."""
    hoje = hoje or timezone.localdate()
    inicio = _data(params.get('inicio')) or date(hoje.year, 1, 1)
    fim = _data(params.get('fim')) or date(hoje.year, 12, 31)

    tipo = params.get('tipo') or agregacao.TIPO_TODOS
    if tipo not in agregacao.TIPOS_FILTRO:
        tipo = agregacao.TIPO_TODOS

    return {'inicio': inicio, 'fim': fim, 'tipo': tipo}

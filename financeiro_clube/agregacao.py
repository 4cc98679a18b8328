"""
Cálculos do financeiro sobre listas de lançamentos já carregadas
(dashboard, página de lançamentos e relatório). Funções puras: não tocam
no banco nem no cache.
"""
from collections import namedtuple
from decimal import Decimal

from .models import TIPO_DESPESA, TIPO_RECEITA

CENTAVOS = Decimal('0.01')
TIPO_TODOS = 'todos'
TIPOS_FILTRO = (TIPO_TODOS, TIPO_RECEITA, TIPO_DESPESA)

class ResumoFinanceiro(namedtuple('ResumoFinanceiro', ['receitas', 'despesas', 'saldo'])):
    __slots__ = ()

    @property
    def saldo_positivo(self):
        # Saldo zero conta como positivo (cor verde na tela)
        return self.saldo >= 0


def _valor(lancamento):
    return Decimal(str(lancamento.valor or 0))


def resumir(lancamentos):
    receitas = Decimal('0')
    despesas = Decimal('0')

    for l in lancamentos:
        if l.tipo == TIPO_RECEITA:
            receitas += _valor(l)
        elif l.tipo == TIPO_DESPESA:
            despesas += _valor(l)

    receitas = receitas.quantize(CENTAVOS)
    despesas = despesas.quantize(CENTAVOS)
    return ResumoFinanceiro(receitas, despesas, receitas - despesas)


def ultimos(lancamentos, n=5):
    """Os n lançamentos mais recentes (data decrescente)."""
    return sorted(lancamentos, key=lambda l: l.data, reverse=True)[:n]


def filtrar_por_tipo(lancamentos, tipo=TIPO_TODOS):
    if not tipo or tipo == TIPO_TODOS:
        return list(lancamentos)
    return [l for l in lancamentos if l.tipo == tipo]


def filtrar(lancamentos, inicio=None, fim=None, tipo=TIPO_TODOS):
    """
    Restringe ao intervalo [inicio, fim] (datas inclusive) e ao tipo.
    Qualquer um dos limites pode ser None (intervalo aberto naquele lado).
    """
    if inicio and fim and inicio > fim:
        return []

    resultado = []
    for l in filtrar_por_tipo(lancamentos, tipo):
        if inicio and l.data < inicio:
            continue
        if fim and l.data > fim:
            continue
        resultado.append(l)
    return resultado


def totais_agendamentos(agendamentos, hoje):
    """Painel da agenda no dashboard do admin."""
    total_valor = sum((Decimal(str(a.valor_cobrado)) for a in agendamentos if a.valor_cobrado is not None), Decimal('0'))
    futuros = sorted((a for a in agendamentos if a.data >= hoje), key=lambda a: a.data)

    return {
        'total': len(agendamentos),
        'valor_total': total_valor.quantize(CENTAVOS),
        'hoje': sum(1 for a in agendamentos if a.data == hoje),
        'proximo': futuros[0] if futuros else None,
    }

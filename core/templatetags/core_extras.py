from decimal import Decimal, InvalidOperation

from django import template

from core.permissoes import pode_acessar

register = template.Library()


@register.filter(name='pode')
def pode(papel, requisito):
    """{% if papel|pode:'admin' %} ... {% endif %}"""
    return pode_acessar(papel, requisito or None)


@register.filter(name='moeda')
def moeda(valor):
    """Formata em reais: 1234.5 -> 'R$ 1.234,50'"""
    try:
        valor = Decimal(valor or 0).quantize(Decimal('0.01'))
    except (InvalidOperation, TypeError, ValueError):
        return valor
    texto = f"{abs(valor):,.2f}".replace(',', 'X').replace('.', ',').replace('X', '.')
    sinal = '-' if valor < 0 else ''
    return f"{sinal}R$ {texto}"

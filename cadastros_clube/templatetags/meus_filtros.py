from django import template
from django.utils import timezone
import re

register = template.Library()

@register.filter(name='apenas_numeros')
def apenas_numeros(valor):
    """Remove tudo que não for dígito"""
    if valor:
        return re.sub(r'\D', '', str(valor))
    return ''

@register.filter(name='whatsapp')
def whatsapp(telefone):
    """Número no formato do link wa.me (com DDI 55 quando vier só DDD + número)"""
    numero = apenas_numeros(telefone)
    if not numero:
        return ''
    if len(numero) <= 11:
        numero = '55' + numero
    return numero

@register.filter(name='idade')
def idade(data_nascimento, referencia=None):
    if not data_nascimento:
        return ''
    hoje = referencia or timezone.localdate()
    anos = hoje.year - data_nascimento.year
    if (hoje.month, hoje.day) < (data_nascimento.month, data_nascimento.day):
        anos -= 1
    return anos

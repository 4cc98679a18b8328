from .permissoes import eh_admin


def sessao_clube(request):
    """
    Expõe o papel resolvido para os templates.
    Exemplo de retorno: {'papel': 'admin', 'eh_admin': True}
    """
    sessao = getattr(request, 'sessao', None)
    if sessao is None or not sessao.autenticado:
        return {'papel': None, 'eh_admin': False}

    return {'papel': sessao.papel, 'eh_admin': eh_admin(sessao.papel)}

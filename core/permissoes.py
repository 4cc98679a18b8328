from .models import PAPEL_ADMIN, PAPEL_ASSOCIADO

PAPEIS_VALIDOS = (PAPEL_ADMIN, PAPEL_ASSOCIADO)


def pode_acessar(papel, requisito=None):
    """
    Decisão única de autorização, usada pelas rotas protegidas, pelos botões
    de ação nos templates e pelo calendário.

    - Sem requisito: qualquer identidade autenticada passa.
    - Papel ainda não resolvido (None) nunca satisfaz um requisito.
    """
    if requisito is None:
        return True
    if papel is None:
        return False
    return papel == requisito


def eh_admin(papel):
    return pode_acessar(papel, PAPEL_ADMIN)

from django.shortcuts import redirect
from django.contrib import messages
from functools import wraps

from .permissoes import pode_acessar

MSG_SEM_PERMISSAO = "Você não tem permissão para acessar esta página."


def _checar_acesso(request, papel):
    """Retorna um redirect quando o acesso é negado, ou None quando liberado."""
    sessao = request.sessao

    if not sessao.autenticado:
        return redirect('login')

    if not pode_acessar(sessao.papel, papel):
        messages.error(request, MSG_SEM_PERMISSAO)
        return redirect('dashboard')

    return None


def papel_requerido(papel=None):
    """Rota protegida: exige login e, se informado, o papel."""
    def decorator(view_func):
        @wraps(view_func)
        def _wrapped_view(request, *args, **kwargs):
            negado = _checar_acesso(request, papel)
            if negado is not None:
                return negado
            return view_func(request, *args, **kwargs)

        return _wrapped_view
    return decorator


class PapelRequeridoMixin:
    """Versão para CBVs. Defina papel_requerido = 'admin' na view."""
    papel_requerido = None

    def dispatch(self, request, *args, **kwargs):
        negado = _checar_acesso(request, self.papel_requerido)
        if negado is not None:
            return negado
        return super().dispatch(request, *args, **kwargs)

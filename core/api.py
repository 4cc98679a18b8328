"""
Endpoints JSON de gestão de usuários.

Os dois exigem 'Authorization: Bearer <token>' de um usuário autenticado e
com papel admin. O CORS (preflight e cabeçalhos) fica com o
corsheaders, configurado em settings para /api/.
"""
import json
import logging

from django.http import JsonResponse
from django.views.decorators.csrf import csrf_exempt

from . import services
from .exceptions import ErroDominio
from .tokens import usuario_da_requisicao

logger = logging.getLogger(__name__)


def _resposta(corpo, status=200):
    return JsonResponse(corpo, status=status)


def _ler_corpo(request):
    try:
        dados = json.loads(request.body or b'{}')
    except (ValueError, UnicodeDecodeError):
        return {}
    return dados if isinstance(dados, dict) else {}


def _autenticar(request):
    """Retorna (usuario, None) ou (None, resposta de erro)."""
    cabecalho = request.headers.get('Authorization')
    if not cabecalho:
        return None, _resposta({'error': 'Cabeçalho Authorization obrigatório'}, 401)

    usuario = usuario_da_requisicao(request)
    if usuario is None:
        return None, _resposta({'error': 'Não autorizado'}, 401)
    return usuario, None


@csrf_exempt
def criar_usuario(request):
    if request.method != 'POST':
        return _resposta({'error': 'Método não permitido'}, 405)

    solicitante, erro = _autenticar(request)
    if erro is not None:
        return erro

    try:
        services.verificar_admin(solicitante, "Apenas administradores podem criar usuários")

        dados = _ler_corpo(request)
        user = services.criar_usuario(
            dados.get('email'), dados.get('password'), dados.get('nome'), dados.get('role')
        )
    except ErroDominio as e:
        return _resposta({'error': e.mensagem}, e.status)
    except Exception as e:
        logger.exception("Erro inesperado ao criar usuário")
        return _resposta({'error': str(e) or 'Erro desconhecido'}, 500)

    return _resposta({'success': True, 'user': {'id': user.pk, 'email': user.email}}, 200)


@csrf_exempt
def gerenciar_usuario(request):
    solicitante, erro = _autenticar(request)
    if erro is not None:
        return erro

    if request.method != 'POST':
        return _resposta({'error': 'Ação inválida'}, 400)

    try:
        services.verificar_admin(solicitante)

        dados = _ler_corpo(request)
        acao = dados.get('action')

        if acao == 'update':
            services.atualizar_usuario(
                dados.get('userId'),
                nome=dados.get('nome'),
                papel=dados.get('role'),
                ativo=dados.get('ativo'),
            )
            return _resposta({'success': True})

        if acao == 'delete':
            services.excluir_usuario(solicitante, dados.get('userId'))
            return _resposta({'success': True})

        return _resposta({'error': 'Ação inválida'}, 400)

    except ErroDominio as e:
        return _resposta({'error': e.mensagem}, e.status)
    except Exception as e:
        logger.exception("Erro inesperado ao gerenciar usuário")
        return _resposta({'error': str(e) or 'Erro desconhecido'}, 500)

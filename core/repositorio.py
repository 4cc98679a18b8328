"""
Acesso às coleções (associados, familiares, categorias, lançamentos,
agendamentos) com cache por coleção.

listar() lê do cache; criar/atualizar/excluir gravam numa transação e, só
se deu certo, invalidam e recarregam a coleção e avisam o usuário. Em caso
de falha o cache fica como estava e o erro sobe como ErroDominio.
"""
import logging

from django.conf import settings
from django.contrib import messages
from django.core.cache import cache
from django.core.exceptions import ObjectDoesNotExist, ValidationError
from django.db import DatabaseError, IntegrityError, transaction
from django.db.models import ProtectedError

from .exceptions import (
    ErroConexao,
    ErroDominio,
    ErroNaoEncontrado,
    ErroRestricao,
    ErroValidacao,
)

logger = logging.getLogger(__name__)

ACOES = {
    'criar': ('criar', 'criado'),
    'atualizar': ('atualizar', 'atualizado'),
    'excluir': ('remover', 'removido'),
}


def mensagem_de(erro):
    """Texto legível de um ValidationError (com ou sem dicionário de campos)."""
    if hasattr(erro, 'message_dict'):
        partes = []
        for campo, msgs in erro.message_dict.items():
            texto = '; '.join(msgs)
            partes.append(texto if campo == '__all__' else f"{campo}: {texto}")
        return ' | '.join(partes)
    return '; '.join(erro.messages)


class Repositorio:
    model = None
    colecao = None
    ordenacao = ()
    nome_entidade = 'Registro'
    # Gênero da entidade nas mensagens ("Categoria criada", "Associado criado")
    feminino = False

    def __init__(self, request=None):
        self.request = request

    # --- LEITURA ---

    def get_queryset(self):
        return self.model.objects.all().order_by(*self.ordenacao)

    def get_chave_cache(self):
        return f"colecao:{self.colecao}"

    def listar(self):
        chave = self.get_chave_cache()
        dados = cache.get(chave)
        if dados is None:
            dados = list(self.get_queryset())
            cache.set(chave, dados, settings.CACHE_TIMEOUT_COLECOES)
        return dados

    def invalidar(self, recarregar=True):
        cache.delete(self.get_chave_cache())
        if recarregar:
            self.listar()

    def obter(self, pk):
        try:
            return self.get_queryset().get(pk=pk)
        except (self.model.DoesNotExist, ValueError, TypeError):
            raise ErroNaoEncontrado(f"{self.nome_entidade} não encontrad{self._sufixo()}.")

    # --- ESCRITA ---

    def preparar(self, dados):
        """Gancho para subclasses ajustarem os campos antes de gravar."""
        return dict(dados)

    def criar(self, dados):
        def operacao():
            obj = self.model(**self.preparar(dados))
            obj.full_clean()
            obj.save()
            return obj

        return self._executar('criar', operacao)

    def atualizar(self, pk, dados):
        def operacao():
            obj = self.obter(pk)
            for campo, valor in self.preparar(dados).items():
                setattr(obj, campo, valor)
            obj.full_clean()
            obj.save()
            return obj

        return self._executar('atualizar', operacao)

    def excluir(self, pk):
        def operacao():
            self.obter(pk).delete()
            return pk

        return self._executar('excluir', operacao)

    def _executar(self, acao, operacao):
        try:
            with transaction.atomic():
                resultado = operacao()
        except ErroDominio as e:
            self._falhou(acao, e)
            raise
        except ValidationError as e:
            erro = ErroValidacao(mensagem_de(e))
            self._falhou(acao, erro)
            raise erro from e
        except ProtectedError as e:
            erro = ErroRestricao(
                f"{self.nome_entidade} está em uso por outros registros e não pode ser removid{self._sufixo()}."
            )
            self._falhou(acao, erro)
            raise erro from e
        except IntegrityError as e:
            erro = ErroRestricao(str(e))
            self._falhou(acao, erro)
            raise erro from e
        except ObjectDoesNotExist as e:
            erro = ErroNaoEncontrado(str(e))
            self._falhou(acao, erro)
            raise erro from e
        except DatabaseError as e:
            erro = ErroConexao(f"Falha de comunicação com o banco de dados: {e}")
            self._falhou(acao, erro)
            raise erro from e

        self.invalidar()
        self._sucesso(acao, resultado)
        return resultado

    # --- NOTIFICAÇÕES ---

    def _sufixo(self):
        return 'a' if self.feminino else 'o'

    def _sucesso(self, acao, obj):
        participio = ACOES[acao][1][:-1] + self._sufixo()
        texto = f"{self.nome_entidade} {participio} com sucesso"
        logger.info(f"{texto} (id={getattr(obj, 'pk', obj)})")
        if self.request is not None:
            messages.success(self.request, texto)

    def _falhou(self, acao, erro):
        infinitivo = ACOES[acao][0]
        texto = f"Erro ao {infinitivo} {self.nome_entidade.lower()}: {erro.mensagem}"
        logger.warning(texto)
        if self.request is not None:
            messages.error(self.request, texto)

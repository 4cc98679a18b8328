from django.core.cache import cache

from core.repositorio import Repositorio
from .models import Associado, Familiar


class RepositorioAssociados(Repositorio):
    model = Associado
    colecao = 'associados'
    ordenacao = ('nome_completo', 'id')
    nome_entidade = 'Associado'


def chave_familiares(associado_id):
    return f"colecao:familiares:{associado_id}"


class RepositorioFamiliares(Repositorio):
    """Familiares de um associado. Sem associado_id não consulta nada."""
    model = Familiar
    colecao = 'familiares'
    ordenacao = ('nome', 'id')
    nome_entidade = 'Familiar'

    def __init__(self, associado_id, request=None):
        super().__init__(request)
        self.associado_id = associado_id

    def get_queryset(self):
        return super().get_queryset().filter(associado_id=self.associado_id)

    def get_chave_cache(self):
        return chave_familiares(self.associado_id)

    def listar(self):
        if not self.associado_id:
            return []
        return super().listar()

    def invalidar(self, recarregar=True):
        if not self.associado_id:
            return
        super().invalidar(recarregar)

    def preparar(self, dados):
        dados = super().preparar(dados)
        dados.pop('associado', None)
        dados['associado_id'] = self.associado_id
        return dados


def invalidar_familiares(associado_id):
    cache.delete(chave_familiares(associado_id))

from core.repositorio import Repositorio
from .models import CategoriaConta, Lancamento


class RepositorioCategorias(Repositorio):
    model = CategoriaConta
    colecao = 'categorias'
    ordenacao = ('nome', 'id')
    nome_entidade = 'Categoria'
    feminino = True


class RepositorioLancamentos(Repositorio):
    model = Lancamento
    colecao = 'lancamentos'
    ordenacao = ('-data', '-id')
    nome_entidade = 'Lançamento'

    def get_queryset(self):
        # Cada lançamento já vem com a categoria para exibição
        return super().get_queryset().select_related('categoria')

from django.views.generic import ListView, CreateView, UpdateView, DeleteView
from django.urls import reverse_lazy

from core.mixins import RepositorioListMixin, RepositorioCreateMixin, RepositorioUpdateMixin, RepositorioDeleteMixin
from core.models import PAPEL_ADMIN

# Imports Locais
from . import agregacao
from .models import CategoriaConta, Lancamento, TIPO_RECEITA, TIPO_DESPESA
from .forms import CategoriaForm, LancamentoForm
from .services import RepositorioCategorias, RepositorioLancamentos

# ==============================================================================
# 1. LANÇAMENTOS
# ==============================================================================

class LancamentoListView(RepositorioListMixin, ListView):
    papel_requerido = PAPEL_ADMIN
    repositorio_class = RepositorioLancamentos
    template_name = 'financeiro_clube/lancamento_list.html'
    context_object_name = 'lancamentos'

    def get_tipo(self):
        tipo = self.request.GET.get('tipo') or agregacao.TIPO_TODOS
        return tipo if tipo in agregacao.TIPOS_FILTRO else agregacao.TIPO_TODOS

    def get_queryset(self):
        return agregacao.filtrar_por_tipo(super().get_queryset(), self.get_tipo())

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        # Totais sempre sobre o conjunto filtrado
        context['resumo'] = agregacao.resumir(context['lancamentos'])
        context['tipo'] = self.get_tipo()
        return context

class LancamentoCreateView(RepositorioCreateMixin, CreateView):
    papel_requerido = PAPEL_ADMIN
    repositorio_class = RepositorioLancamentos
    model = Lancamento
    form_class = LancamentoForm
    template_name = 'financeiro_clube/form_generico.html'
    success_url = reverse_lazy('lancamento_list')
    extra_context = {'titulo': 'Novo Lançamento'}

class LancamentoUpdateView(RepositorioUpdateMixin, UpdateView):
    papel_requerido = PAPEL_ADMIN
    repositorio_class = RepositorioLancamentos
    model = Lancamento
    form_class = LancamentoForm
    template_name = 'financeiro_clube/form_generico.html'
    success_url = reverse_lazy('lancamento_list')
    extra_context = {'titulo': 'Editar Lançamento'}

class LancamentoDeleteView(RepositorioDeleteMixin, DeleteView):
    papel_requerido = PAPEL_ADMIN
    repositorio_class = RepositorioLancamentos
    model = Lancamento
    template_name = 'financeiro_clube/confirmar_exclusao.html'
    success_url = reverse_lazy('lancamento_list')

# ==============================================================================
# 2. PLANO DE CONTAS
# ==============================================================================

class CategoriaListView(RepositorioListMixin, ListView):
    papel_requerido = PAPEL_ADMIN
    repositorio_class = RepositorioCategorias
    template_name = 'financeiro_clube/categoria_list.html'
    context_object_name = 'categorias'

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        # Separa as listas para exibir organizado na tela
        context['receitas'] = [c for c in context['categorias'] if c.tipo == TIPO_RECEITA]
        context['despesas'] = [c for c in context['categorias'] if c.tipo == TIPO_DESPESA]
        return context

class CategoriaCreateView(RepositorioCreateMixin, CreateView):
    papel_requerido = PAPEL_ADMIN
    repositorio_class = RepositorioCategorias
    model = CategoriaConta
    form_class = CategoriaForm
    template_name = 'financeiro_clube/form_generico.html'
    success_url = reverse_lazy('categoria_list')
    extra_context = {'titulo': 'Nova Categoria'}

class CategoriaUpdateView(RepositorioUpdateMixin, UpdateView):
    papel_requerido = PAPEL_ADMIN
    repositorio_class = RepositorioCategorias
    model = CategoriaConta
    form_class = CategoriaForm
    template_name = 'financeiro_clube/form_generico.html'
    success_url = reverse_lazy('categoria_list')
    extra_context = {'titulo': 'Editar Categoria'}

class CategoriaDeleteView(RepositorioDeleteMixin, DeleteView):
    papel_requerido = PAPEL_ADMIN
    repositorio_class = RepositorioCategorias
    model = CategoriaConta
    template_name = 'financeiro_clube/confirmar_exclusao.html'
    success_url = reverse_lazy('categoria_list')

from django.shortcuts import render, get_object_or_404, redirect
from django.views.generic import ListView, CreateView, UpdateView, DeleteView, DetailView
from django.urls import reverse_lazy
from django.views.decorators.http import require_POST

from core.decorators import PapelRequeridoMixin, papel_requerido
from core.exceptions import ErroDominio
from core.mixins import RepositorioListMixin, RepositorioCreateMixin, RepositorioUpdateMixin, RepositorioDeleteMixin
from core.models import PAPEL_ADMIN

# Imports Locais
from .models import Associado, Familiar
from .forms import AssociadoForm, FamiliarForm
from .services import RepositorioAssociados, RepositorioFamiliares

# --- ASSOCIADOS ---
class AssociadoListView(RepositorioListMixin, ListView):
    papel_requerido = PAPEL_ADMIN
    repositorio_class = RepositorioAssociados
    template_name = 'cadastros_clube/associado_list.html'
    context_object_name = 'associados'

    def get_queryset(self):
        associados = super().get_queryset()
        busca = (self.request.GET.get('q') or '').strip().lower()
        if busca:
            associados = [a for a in associados if busca in a.nome_completo.lower() or busca in a.cpf]
        return associados

class AssociadoCreateView(RepositorioCreateMixin, CreateView):
    papel_requerido = PAPEL_ADMIN
    repositorio_class = RepositorioAssociados
    model = Associado
    form_class = AssociadoForm
    template_name = 'cadastros_clube/associado_form.html'
    success_url = reverse_lazy('associado_list')

class AssociadoUpdateView(RepositorioUpdateMixin, UpdateView):
    papel_requerido = PAPEL_ADMIN
    repositorio_class = RepositorioAssociados
    model = Associado
    form_class = AssociadoForm
    template_name = 'cadastros_clube/associado_form.html'
    success_url = reverse_lazy('associado_list')

class AssociadoDeleteView(RepositorioDeleteMixin, DeleteView):
    papel_requerido = PAPEL_ADMIN
    repositorio_class = RepositorioAssociados
    model = Associado
    template_name = 'cadastros_clube/associado_confirm_delete.html'
    success_url = reverse_lazy('associado_list')

class AssociadoDetailView(PapelRequeridoMixin, DetailView):
    papel_requerido = PAPEL_ADMIN
    model = Associado
    template_name = 'cadastros_clube/associado_detail.html'
    context_object_name = 'associado'

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['familiares'] = RepositorioFamiliares(self.object.pk, self.request).listar()
        context.setdefault('familiar_form', FamiliarForm())
        return context

# --- FAMILIARES (dentro do detalhe do associado) ---

@require_POST
@papel_requerido(PAPEL_ADMIN)
def familiar_create(request, pk):
    associado = get_object_or_404(Associado, pk=pk)
    form = FamiliarForm(request.POST)

    if form.is_valid():
        try:
            RepositorioFamiliares(associado.pk, request).criar(form.cleaned_data)
        except ErroDominio:
            pass  # mensagem já registrada; volta para o detalhe
        return redirect('associado_detail', pk=pk)

    # Formulário inválido: reexibe o detalhe com os erros
    view = AssociadoDetailView()
    view.setup(request, pk=pk)
    view.object = associado
    context = view.get_context_data(object=associado, familiar_form=form)
    return render(request, view.template_name, context, status=400)

@papel_requerido(PAPEL_ADMIN)
def familiar_update(request, pk, familiar_pk):
    familiar = get_object_or_404(Familiar, pk=familiar_pk, associado_id=pk)

    if request.method == 'POST':
        form = FamiliarForm(request.POST, instance=familiar)
        if form.is_valid():
            try:
                RepositorioFamiliares(pk, request).atualizar(familiar.pk, form.cleaned_data)
            except ErroDominio:
                pass
            else:
                return redirect('associado_detail', pk=pk)
    else:
        form = FamiliarForm(instance=familiar)

    return render(request, 'cadastros_clube/familiar_form.html', {'form': form, 'familiar': familiar, 'associado': familiar.associado})

@require_POST
@papel_requerido(PAPEL_ADMIN)
def familiar_delete(request, pk, familiar_pk):
    try:
        RepositorioFamiliares(pk, request).excluir(familiar_pk)
    except ErroDominio:
        pass  # mensagem já registrada pelo repositório
    return redirect('associado_detail', pk=pk)

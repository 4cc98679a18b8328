from django.http import HttpResponseRedirect

from .decorators import PapelRequeridoMixin
from .exceptions import ErroDominio


class RepositorioMixin(PapelRequeridoMixin):
    """
    Liga as CBVs genéricas (ListView/CreateView/UpdateView/DeleteView) ao
    repositório da coleção: leitura pelo cache, gravação com invalidação
    e mensagem para o usuário.
    """
    repositorio_class = None

    def get_repositorio(self):
        return self.repositorio_class(request=self.request)


class RepositorioListMixin(RepositorioMixin):
    def get_queryset(self):
        return self.get_repositorio().listar()


class RepositorioCreateMixin(RepositorioMixin):
    def form_valid(self, form):
        try:
            self.object = self.get_repositorio().criar(form.cleaned_data)
        except ErroDominio:
            return self.form_invalid(form)
        return HttpResponseRedirect(self.get_success_url())


class RepositorioUpdateMixin(RepositorioMixin):
    def form_valid(self, form):
        try:
            self.object = self.get_repositorio().atualizar(self.object.pk, form.cleaned_data)
        except ErroDominio:
            return self.form_invalid(form)
        return HttpResponseRedirect(self.get_success_url())


class RepositorioDeleteMixin(RepositorioMixin):
    def form_valid(self, form):
        success_url = self.get_success_url()
        try:
            self.get_repositorio().excluir(self.object.pk)
        except ErroDominio:
            # A mensagem de erro já foi registrada pelo repositório
            pass
        return HttpResponseRedirect(success_url)

from datetime import date

from django.contrib import messages
from django.http import Http404
from django.shortcuts import render, redirect
from django.urls import reverse
from django.utils import timezone

from core.decorators import papel_requerido
from core.exceptions import ErroDominio
from core.models import PAPEL_ADMIN
from core.permissoes import pode_acessar

# Imports Locais
from . import calendario
from .forms import AgendamentoForm
from .services import RepositorioAgendamentos

# ==============================================================================
# 1. CALENDÁRIO MENSAL
# ==============================================================================

def _mes_da_requisicao(request):
    hoje = timezone.localdate()
    try:
        ano = int(request.GET.get('ano', hoje.year))
        mes = int(request.GET.get('mes', hoje.month))
        return date(ano, mes, 1)
    except (TypeError, ValueError, OverflowError):
        return hoje.replace(day=1)


@papel_requerido()
def calendario_mensal(request):
    referencia = _mes_da_requisicao(request)
    hoje = timezone.localdate()
    agendamentos = RepositorioAgendamentos(request).listar()

    context = {
        'referencia': referencia,
        'nome_mes': calendario.NOMES_MESES[referencia.month],
        'nomes_dias': calendario.NOMES_DIAS,
        'semanas': calendario.montar_mes(referencia.year, referencia.month, agendamentos, hoje),
        'mes_anterior': calendario.navegar_mes(referencia, -1),
        'mes_seguinte': calendario.navegar_mes(referencia, 1),
    }
    return render(request, 'agenda_clube/calendario_mensal.html', context)

# ==============================================================================
# 2. DIA DA AGENDA (disponível / ocupado)
# ==============================================================================

@papel_requerido()
def dia_agenda(request, data):
    try:
        dia = date.fromisoformat(data)
    except ValueError:
        raise Http404("Data inválida")

    repositorio = RepositorioAgendamentos(request)
    agendamentos = repositorio.listar()
    agendamento = calendario.buscar_agendamento(agendamentos, dia)
    estado = calendario.estado_dia(agendamentos, dia)
    acoes = calendario.acoes_disponiveis(request.sessao.papel, estado)

    if request.method == 'POST':
        if not pode_acessar(request.sessao.papel, PAPEL_ADMIN):
            messages.error(request, "Apenas administradores podem alterar a agenda.")
            return redirect('dia_agenda', data=data)
        return _alterar_dia(request, repositorio, dia, agendamento, estado)

    modo = request.GET.get('modo')
    if modo not in acoes:
        modo = calendario.ACAO_VISUALIZAR if agendamento else calendario.ACAO_CRIAR

    form = None
    if modo == calendario.ACAO_CRIAR and calendario.ACAO_CRIAR in acoes:
        form = AgendamentoForm()
    elif modo == calendario.ACAO_EDITAR:
        form = AgendamentoForm(instance=agendamento)

    return render(request, 'agenda_clube/dia.html', {
        'dia': dia,
        'agendamento': agendamento,
        'estado': estado,
        'acoes': acoes,
        'modo': modo,
        'form': form,
    })


def _alterar_dia(request, repositorio, dia, agendamento, estado):
    acao = request.POST.get('acao')
    data = dia.isoformat()

    if acao == calendario.ACAO_EXCLUIR and agendamento:
        try:
            repositorio.excluir(agendamento.pk)
        except ErroDominio:
            return redirect('dia_agenda', data=data)
        return redirect(_url_calendario(dia))

    if acao == calendario.ACAO_EDITAR and agendamento:
        form = AgendamentoForm(request.POST, instance=agendamento)
        modo = calendario.ACAO_EDITAR
    elif acao == calendario.ACAO_CRIAR:
        form = AgendamentoForm(request.POST)
        modo = calendario.ACAO_CRIAR
    else:
        messages.error(request, "Ação inválida.")
        return redirect('dia_agenda', data=data)

    if form.is_valid():
        dados = dict(form.cleaned_data, data=dia)
        try:
            if modo == calendario.ACAO_EDITAR:
                repositorio.atualizar(agendamento.pk, dados)
            else:
                repositorio.criar(dados)
        except ErroDominio:
            pass  # mensagem já registrada; reexibe o formulário
        else:
            return redirect('dia_agenda', data=data)

    return render(request, 'agenda_clube/dia.html', {
        'dia': dia,
        'agendamento': agendamento,
        'estado': estado,
        'acoes': calendario.acoes_disponiveis(request.sessao.papel, estado),
        'modo': modo,
        'form': form,
    }, status=400)


def _url_calendario(dia):
    return f"{reverse('calendario_mensal')}?ano={dia.year}&mes={dia.month}"

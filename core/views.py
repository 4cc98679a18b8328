from django.shortcuts import render, redirect
from django.contrib import messages
from django.http import Http404
from django.utils import timezone
from django.views.decorators.http import require_POST

from agenda_clube import calendario
from agenda_clube.services import RepositorioAgendamentos
from financeiro_clube import agregacao
from financeiro_clube.services import RepositorioLancamentos

from . import services, sessao
from .decorators import papel_requerido
from .exceptions import ErroDominio, ErroValidacao
from .forms import CadastroForm, EditarUsuarioForm, LoginForm, UsuarioSistemaForm
from .models import PAPEL_ADMIN

# ==============================================================================
# 1. AUTENTICAÇÃO (rota pública)
# ==============================================================================

def login_view(request):
    if request.sessao.autenticado:
        return redirect('dashboard')

    form = LoginForm(request.POST or None)
    cadastro_form = CadastroForm()

    if request.method == 'POST':
        try:
            erro = sessao.entrar(request, request.POST.get('email'), request.POST.get('senha'))
        except ErroValidacao as e:
            erro = e.mensagem

        if erro is None:
            messages.success(request, "Login realizado com sucesso!")
            return redirect('dashboard')
        messages.error(request, erro)

    return render(request, 'core/login.html', {'form': form, 'cadastro_form': cadastro_form})


def cadastro(request):
    if request.method != 'POST':
        return redirect('login')

    form = CadastroForm(request.POST)
    try:
        erro = sessao.cadastrar(request.POST.get('email'), request.POST.get('senha'), request.POST.get('nome'))
    except ErroValidacao as e:
        erro = e.mensagem

    if erro is None:
        # Não autentica: o usuário entra pela tela de login
        messages.success(request, "Conta criada com sucesso! Você já pode fazer login.")
        return redirect('login')

    messages.error(request, f"Erro ao criar conta: {erro}")
    return render(request, 'core/login.html', {'form': LoginForm(), 'cadastro_form': form, 'aba_cadastro': True})


@require_POST
def logout_view(request):
    sessao.sair(request)
    return redirect('login')

# ==============================================================================
# 2. DASHBOARD
# ==============================================================================

@papel_requerido()
def dashboard(request):
    hoje = timezone.localdate()
    agendamentos = RepositorioAgendamentos(request).listar()

    if request.sessao.papel == PAPEL_ADMIN:
        lancamentos = RepositorioLancamentos(request).listar()
        context = {
            'resumo': agregacao.resumir(lancamentos),
            'ultimos_lancamentos': agregacao.ultimos(lancamentos, 5),
            'estatisticas_agenda': agregacao.totais_agendamentos(agendamentos, hoje),
        }
        return render(request, 'core/dashboard_admin.html', context)

    context = {
        'proximos_agendamentos': calendario.proximos(agendamentos, hoje, 3),
    }
    return render(request, 'core/dashboard_associado.html', context)

# ==============================================================================
# 3. CONFIGURAÇÕES: USUÁRIOS DO SISTEMA (apenas admin)
# ==============================================================================

@papel_requerido(PAPEL_ADMIN)
def lista_usuarios(request):
    usuarios = services.listar_usuarios()
    return render(request, 'core/lista_usuarios.html', {
        'usuarios': usuarios,
        'token_acesso': request.session.get(sessao.CHAVE_TOKEN_SESSAO),
    })


@papel_requerido(PAPEL_ADMIN)
def novo_usuario_sistema(request):
    if request.method == 'POST':
        form = UsuarioSistemaForm(request.POST)
        if form.is_valid():
            dados = form.cleaned_data
            try:
                services.criar_usuario(dados['email'], dados['senha'], dados['nome'], dados['papel'])
            except ErroDominio as e:
                messages.error(request, e.mensagem)
            else:
                messages.success(request, "Usuário criado com sucesso")
                return redirect('lista_usuarios')
    else:
        form = UsuarioSistemaForm()

    return render(request, 'core/form_usuario.html', {'form': form, 'titulo': 'Novo Usuário'})


@papel_requerido(PAPEL_ADMIN)
def editar_usuario(request, pk):
    usuario = next((u for u in services.listar_usuarios() if u.pk == pk), None)
    if usuario is None:
        raise Http404("Usuário não encontrado")

    if request.method == 'POST':
        form = EditarUsuarioForm(request.POST)
        if form.is_valid():
            dados = form.cleaned_data
            try:
                services.atualizar_usuario(pk, nome=dados['nome'], papel=dados['papel'], ativo=dados['ativo'])
            except ErroDominio as e:
                messages.error(request, e.mensagem)
            else:
                messages.success(request, "Usuário atualizado com sucesso")
                return redirect('lista_usuarios')
    else:
        form = EditarUsuarioForm(initial={'nome': usuario.nome, 'papel': usuario.papel, 'ativo': usuario.is_active})

    return render(request, 'core/form_usuario.html', {'form': form, 'titulo': 'Editar Usuário', 'usuario_editado': usuario})


@require_POST
@papel_requerido(PAPEL_ADMIN)
def excluir_usuario(request, pk):
    try:
        services.excluir_usuario(request.user, pk)
    except ErroDominio as e:
        messages.error(request, e.mensagem)
    else:
        messages.success(request, "Usuário excluído com sucesso")
    return redirect('lista_usuarios')

from core.repositorio import Repositorio
from .models import Agendamento


class RepositorioAgendamentos(Repositorio):
    model = Agendamento
    colecao = 'agendamentos'
    # Com datas repetidas, o primeiro criado vem primeiro
    ordenacao = ('data', 'criado_em', 'id')
    nome_entidade = 'Agendamento'

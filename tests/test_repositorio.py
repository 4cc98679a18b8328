from datetime import date
from decimal import Decimal

import pytest
from django.core.cache import cache

from agenda_clube.services import RepositorioAgendamentos
from cadastros_clube.models import Familiar
from cadastros_clube.services import RepositorioAssociados, RepositorioFamiliares, chave_familiares
from core.exceptions import ErroNaoEncontrado, ErroRestricao, ErroValidacao
from financeiro_clube.services import RepositorioCategorias, RepositorioLancamentos

from .dados import dados_associado

pytestmark = pytest.mark.django_db


def test_listar_guarda_colecao_no_cache():
    repo = RepositorioAssociados()

    assert repo.listar() == []
    assert cache.get('colecao:associados') == []


def test_criar_e_ler_devolve_os_mesmos_campos():
    dados = dados_associado()

    criado = RepositorioAssociados().criar(dados)
    lista = RepositorioAssociados().listar()

    assert [a.pk for a in lista] == [criado.pk]
    for campo, valor in dados.items():
        assert getattr(lista[0], campo) == valor
    assert lista[0].criado_em is not None


def test_campos_gravados_como_digitados():
    dados = dados_associado(
        nome_completo='MARIA DE SOUZA', endereco_rua='Rua XV de Novembro',
        endereco_bairro='jardim ABC', endereco_cidade='são paulo', endereco_estado='sp',
    )

    RepositorioAssociados().criar(dados)
    lido = RepositorioAssociados().listar()[0]

    for campo, valor in dados.items():
        assert getattr(lido, campo) == valor


def test_email_do_associado_normalizado():
    criado = RepositorioAssociados().criar(dados_associado(contato_email='Maria@Exemplo.COM'))
    assert criado.contato_email == 'maria@exemplo.com'


def test_mutacao_invalida_e_recarrega_cache():
    repo = RepositorioAssociados()
    repo.listar()
    primeiro = repo.criar(dados_associado(nome_completo='Ana Souza'))

    assert [a.pk for a in cache.get('colecao:associados')] == [primeiro.pk]

    repo.atualizar(primeiro.pk, {'status': 'inativo'})
    assert cache.get('colecao:associados')[0].status == 'inativo'

    repo.excluir(primeiro.pk)
    assert cache.get('colecao:associados') == []


def test_falha_nao_altera_cache():
    repo = RepositorioAssociados()
    existente = repo.criar(dados_associado())
    antes = [a.pk for a in repo.listar()]

    with pytest.raises(ErroValidacao):
        repo.criar(dados_associado(cpf='', contato_email='nao-e-email'))

    assert [a.pk for a in cache.get('colecao:associados')] == antes == [existente.pk]


def test_listar_ordenado_por_nome():
    repo = RepositorioAssociados()
    repo.criar(dados_associado(nome_completo='Zeca Pagodinho'))
    repo.criar(dados_associado(nome_completo='Ana Souza'))

    assert [a.nome_completo for a in repo.listar()] == ['Ana Souza', 'Zeca Pagodinho']


def test_excluir_inexistente_repete_o_mesmo_erro():
    repo = RepositorioAssociados()

    for _ in range(2):
        with pytest.raises(ErroNaoEncontrado) as exc:
            repo.excluir(99999)
        assert exc.value.mensagem == 'Associado não encontrado.'

    assert repo.listar() == []


def test_categoria_em_uso_nao_pode_ser_excluida(lancamento_aluguel):
    repo = RepositorioCategorias()

    with pytest.raises(ErroRestricao) as exc:
        repo.excluir(lancamento_aluguel.categoria_id)

    assert 'em uso' in exc.value.mensagem
    assert exc.value.status == 400
    assert [c.pk for c in repo.listar()] == [lancamento_aluguel.categoria_id]


def test_lancamento_com_tipo_diferente_da_categoria(categoria_despesa):
    with pytest.raises(ErroValidacao) as exc:
        RepositorioLancamentos().criar({
            'data': date(2025, 1, 5), 'descricao': 'Conta de luz', 'valor': Decimal('120.00'),
            'tipo': 'receita', 'categoria': categoria_despesa, 'observacoes': '',
        })

    assert 'tipo' in exc.value.mensagem


def test_lancamento_com_valor_negativo(categoria_despesa):
    with pytest.raises(ErroValidacao):
        RepositorioLancamentos().criar({
            'data': date(2025, 1, 5), 'descricao': 'Conta de luz', 'valor': Decimal('-1.00'),
            'tipo': 'despesa', 'categoria': categoria_despesa,
        })


def test_lancamentos_vem_com_categoria_e_data_decrescente(categoria_receita, django_assert_num_queries):
    repo = RepositorioLancamentos()
    for dia in (1, 15, 8):
        repo.criar({'data': date(2025, 2, dia), 'descricao': f'Dia {dia}', 'valor': Decimal('10'),
                    'tipo': 'receita', 'categoria': categoria_receita})
    cache.clear()

    with django_assert_num_queries(1):
        lista = repo.listar()
        nomes = [l.categoria.nome for l in lista]

    assert [l.data.day for l in lista] == [15, 8, 1]
    assert nomes == ['Aluguel'] * 3


def test_agendamentos_mesma_data_mantem_ordem_de_criacao():
    repo = RepositorioAgendamentos()
    primeiro = repo.criar({'data': date(2025, 4, 12), 'nome_responsavel': 'Primeiro', 'contato': '1'})
    segundo = repo.criar({'data': date(2025, 4, 12), 'nome_responsavel': 'Segundo', 'contato': '2'})

    assert [a.pk for a in repo.listar()] == [primeiro.pk, segundo.pk]


# ==============================================================================
# Familiares
# ==============================================================================

@pytest.mark.parametrize('associado_id', [None, '', 0])
def test_familiares_sem_associado_nao_consulta(associado_id, django_assert_num_queries):
    repo = RepositorioFamiliares(associado_id)

    with django_assert_num_queries(0):
        assert repo.listar() == []
        repo.invalidar()

    assert cache.get(chave_familiares(associado_id)) is None


def test_familiares_do_associado(associado):
    repo = RepositorioFamiliares(associado.pk)

    familiar = repo.criar({'nome': 'pedro da silva', 'parentesco': 'filho(a)', 'data_nascimento': date(2010, 3, 3)})

    assert familiar.associado_id == associado.pk
    assert familiar.nome == 'pedro da silva'
    assert [f.pk for f in cache.get(chave_familiares(associado.pk))] == [familiar.pk]


def test_excluir_associado_remove_familiares_e_cache(associado):
    RepositorioFamiliares(associado.pk).criar({'nome': 'Pedro', 'parentesco': 'outro', 'data_nascimento': date(2010, 3, 3)})
    assert cache.get(chave_familiares(associado.pk))

    RepositorioAssociados().excluir(associado.pk)

    assert not Familiar.objects.exists()
    assert cache.get(chave_familiares(associado.pk)) is None

import logging

from django.http import HttpResponse
from django.shortcuts import render
from django.template.loader import get_template

from xhtml2pdf import pisa
import openpyxl
from openpyxl.styles import Font, PatternFill, Alignment

from cadastros_clube.services import RepositorioAssociados
from core.decorators import papel_requerido
from core.models import PAPEL_ADMIN
from financeiro_clube import agregacao
from financeiro_clube.services import RepositorioLancamentos

from .filtros import filtrar_associados, filtros_associados, filtros_financeiro

logger = logging.getLogger(__name__)

XLSX_CONTENT_TYPE = 'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'

# ==============================================================================
# 1. RELATÓRIO DE ASSOCIADOS
# ==============================================================================

def _associados_filtrados(request):
    filtros = filtros_associados(request.GET)
    associados = filtrar_associados(RepositorioAssociados(request).listar(), **filtros)
    return associados, filtros


@papel_requerido(PAPEL_ADMIN)
def relatorio_associados(request):
    associados, filtros = _associados_filtrados(request)
    return render(request, 'relatorios_clube/relatorio_associados.html', {
        'associados': associados,
        'filtros': filtros,
    })


@papel_requerido(PAPEL_ADMIN)
def exportar_associados_excel(request):
    associados, filtros = _associados_filtrados(request)

    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = "Associados"

    ws.append(["Nome", "CPF", "Data de Nascimento", "Celular", "Email", "Cidade/UF", "Status", "Associado desde"])
    _estilizar_cabecalho(ws)

    for a in associados:
        ws.append([
            a.nome_completo, a.cpf, a.data_nascimento, a.contato_celular, a.contato_email,
            f"{a.endereco_cidade}/{a.endereco_estado}", a.get_status_display(), a.data_associacao,
        ])
        ws.cell(row=ws.max_row, column=3).number_format = 'DD/MM/YYYY'
        ws.cell(row=ws.max_row, column=8).number_format = 'DD/MM/YYYY'

    ws.column_dimensions['A'].width = 40
    ws.column_dimensions['E'].width = 30

    logger.info(f"Exportando {len(associados)} associados para Excel (status={filtros['status']})")
    return _resposta_excel(wb, "Relatorio_Associados.xlsx")

# ==============================================================================
# 2. RELATÓRIO FINANCEIRO
# ==============================================================================

def _lancamentos_filtrados(request):
    filtros = filtros_financeiro(request.GET)
    lancamentos = agregacao.filtrar(RepositorioLancamentos(request).listar(), **filtros)
    return lancamentos, filtros


@papel_requerido(PAPEL_ADMIN)
def relatorio_financeiro(request):
    lancamentos, filtros = _lancamentos_filtrados(request)
    return render(request, 'relatorios_clube/relatorio_financeiro.html', {
        'lancamentos': lancamentos,
        'resumo': agregacao.resumir(lancamentos),
        'filtros': filtros,
    })


@papel_requerido(PAPEL_ADMIN)
def exportar_financeiro_excel(request):
    lancamentos, filtros = _lancamentos_filtrados(request)
    resumo = agregacao.resumir(lancamentos)

    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = "Financeiro"

    money_format = 'R$ #,##0.00'

    ws.append(["Data", "Descrição", "Categoria", "Tipo", "Valor"])
    _estilizar_cabecalho(ws)

    # Dados
    for l in lancamentos:
        valor = l.valor if l.eh_receita else -l.valor
        ws.append([l.data, l.descricao, l.categoria.nome, l.get_tipo_display(), valor])

        ws.cell(row=ws.max_row, column=1).number_format = 'DD/MM/YYYY'
        cell_valor = ws.cell(row=ws.max_row, column=5)
        cell_valor.number_format = money_format
        cell_valor.font = Font(color="006100") if l.eh_receita else Font(color="FF0000")

    # Totais
    ws.append([])
    for rotulo, valor in (("Receitas", resumo.receitas), ("Despesas", resumo.despesas), ("Saldo", resumo.saldo)):
        ws.append(["", "", "", rotulo, valor])
        ws.cell(row=ws.max_row, column=4).font = Font(bold=True)
        ws.cell(row=ws.max_row, column=5).number_format = money_format

    ws.column_dimensions['A'].width = 15
    ws.column_dimensions['B'].width = 40
    ws.column_dimensions['C'].width = 25

    nome = f"Relatorio_Financeiro_{filtros['inicio']:%Y%m%d}_{filtros['fim']:%Y%m%d}.xlsx"
    return _resposta_excel(wb, nome)


@papel_requerido(PAPEL_ADMIN)
def exportar_financeiro_pdf(request):
    lancamentos, filtros = _lancamentos_filtrados(request)

    template = get_template('relatorios_clube/relatorio_financeiro_pdf.html')
    html = template.render({
        'lancamentos': lancamentos,
        'resumo': agregacao.resumir(lancamentos),
        'filtros': filtros,
    })

    response = HttpResponse(content_type='application/pdf')
    response['Content-Disposition'] = f'attachment; filename="relatorio_financeiro_{filtros["inicio"]:%Y%m%d}.pdf"'

    pisa_status = pisa.CreatePDF(html, dest=response)

    if pisa_status.err:
        logger.error(f"Falha ao gerar PDF do relatório financeiro ({pisa_status.err} erros)")
        return HttpResponse('Erro ao gerar PDF', status=500)
    return response

# ==============================================================================
# 3. AUXILIARES DE EXPORTAÇÃO
# ==============================================================================

def _estilizar_cabecalho(ws):
    header_font = Font(bold=True, color="FFFFFF")
    header_fill = PatternFill(start_color="4F81BD", end_color="4F81BD", fill_type="solid")

    for cell in ws[1]:
        cell.font = header_font
        cell.fill = header_fill
        cell.alignment = Alignment(horizontal='center')


def _resposta_excel(wb, nome_arquivo):
    response = HttpResponse(content_type=XLSX_CONTENT_TYPE)
    response['Content-Disposition'] = f'attachment; filename="{nome_arquivo}"'
    wb.save(response)
    return response

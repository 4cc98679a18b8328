from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator
from django.db import models

TIPO_RECEITA = 'receita'
TIPO_DESPESA = 'despesa'
TIPO_CHOICES = [(TIPO_RECEITA, 'Receita'), (TIPO_DESPESA, 'Despesa')]

# ==============================================================================
# 1. PLANO DE CONTAS
# ==============================================================================

class CategoriaConta(models.Model):
    nome = models.CharField(max_length=100, help_text="Ex: Mensalidades, Aluguel, Luz")
    tipo = models.CharField(max_length=10, choices=TIPO_CHOICES)
    descricao = models.TextField(blank=True, verbose_name="Descrição")

    criado_em = models.DateTimeField(auto_now_add=True)
    atualizado_em = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['nome']
        verbose_name = "Categoria"

    def __str__(self):
        return f"{self.nome} ({self.get_tipo_display()})"

# ==============================================================================
# 2. LANÇAMENTOS
# ==============================================================================

class Lancamento(models.Model):
    data = models.DateField()
    descricao = models.CharField(max_length=200, verbose_name="Descrição")
    valor = models.DecimalField(max_digits=12, decimal_places=2, validators=[MinValueValidator(0)])
    tipo = models.CharField(max_length=10, choices=TIPO_CHOICES)
    # PROTECT: categoria com lançamentos não pode ser apagada
    categoria = models.ForeignKey(CategoriaConta, on_delete=models.PROTECT, related_name='lancamentos')
    observacoes = models.TextField(blank=True, verbose_name="Observações")

    criado_em = models.DateTimeField(auto_now_add=True)
    atualizado_em = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-data', '-id']
        verbose_name = "Lançamento"

    def clean(self):
        if self.categoria_id and self.tipo and self.categoria.tipo != self.tipo:
            raise ValidationError({
                'tipo': f"O tipo do lançamento deve ser igual ao da categoria ({self.categoria.get_tipo_display()})."
            })

    @property
    def eh_receita(self):
        return self.tipo == TIPO_RECEITA

    def __str__(self):
        return f"{self.descricao} - R$ {self.valor} ({self.get_tipo_display()})"

from django.core.validators import MinValueValidator
from django.db import models

# ==============================================================================
# AGENDAMENTOS (aluguel do espaço por dia)
# ==============================================================================

class Agendamento(models.Model):
    # Sem unique em 'data': um dia ocupado é só convenção da tela
    data = models.DateField()
    nome_responsavel = models.CharField(max_length=150, verbose_name="Responsável")
    contato = models.CharField(max_length=100)
    observacoes = models.TextField(blank=True, verbose_name="Observações")
    valor_cobrado = models.DecimalField(
        max_digits=12, decimal_places=2, null=True, blank=True,
        validators=[MinValueValidator(0)], verbose_name="Valor Cobrado"
    )

    criado_em = models.DateTimeField(auto_now_add=True)
    atualizado_em = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['data', 'criado_em', 'id']

    def __str__(self):
        return f"{self.data.strftime('%d/%m/%Y')} - {self.nome_responsavel}"

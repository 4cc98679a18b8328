from django.db import models
from django.utils import timezone

# ==============================================================================
# 1. ASSOCIADOS
# ==============================================================================

class Associado(models.Model):
    STATUS_CHOICES = [('ativo', 'Ativo'), ('inativo', 'Inativo')]

    # --- DADOS PESSOAIS ---
    nome_completo = models.CharField(max_length=150)
    cpf = models.CharField(max_length=14, verbose_name="CPF")
    rg = models.CharField(max_length=20, verbose_name="RG")
    data_nascimento = models.DateField(verbose_name="Data de Nascimento")

    # --- ENDEREÇO ---
    endereco_rua = models.CharField(max_length=150, verbose_name="Rua/Av")
    endereco_numero = models.CharField(max_length=20, verbose_name="Número")
    endereco_complemento = models.CharField(max_length=100, blank=True, verbose_name="Complemento")
    endereco_bairro = models.CharField(max_length=100, verbose_name="Bairro")
    endereco_cidade = models.CharField(max_length=100, verbose_name="Cidade")
    endereco_estado = models.CharField(max_length=2, verbose_name="UF")
    endereco_cep = models.CharField(max_length=9, verbose_name="CEP")

    # --- CONTATO ---
    contato_telefone = models.CharField(max_length=20, blank=True, verbose_name="Telefone")
    contato_celular = models.CharField(max_length=20, verbose_name="Celular")
    contato_email = models.EmailField(verbose_name="Email")

    status = models.CharField(max_length=10, choices=STATUS_CHOICES, default='ativo')
    data_associacao = models.DateField(default=timezone.localdate, verbose_name="Data de Associação")
    observacoes = models.TextField(blank=True)

    criado_em = models.DateTimeField(auto_now_add=True)
    atualizado_em = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['nome_completo']

    def save(self, *args, **kwargs):
        # Só o email é normalizado
        if self.contato_email:
            self.contato_email = self.contato_email.strip().lower()
        super().save(*args, **kwargs)

    def __str__(self):
        return self.nome_completo

    @property
    def endereco_completo(self):
        complemento = f" ({self.endereco_complemento})" if self.endereco_complemento else ""
        return f"{self.endereco_rua}, {self.endereco_numero}{complemento} - {self.endereco_bairro}, {self.endereco_cidade}/{self.endereco_estado}"

# ==============================================================================
# 2. FAMILIARES (dependentes)
# ==============================================================================

class Familiar(models.Model):
    PARENTESCO_CHOICES = [
        ('cônjuge', 'Cônjuge'),
        ('filho(a)', 'Filho(a)'),
        ('pai/mãe', 'Pai/Mãe'),
        ('irmão/irmã', 'Irmão/Irmã'),
        ('outro', 'Outro'),
    ]

    associado = models.ForeignKey(Associado, on_delete=models.CASCADE, related_name='familiares')
    nome = models.CharField(max_length=150)
    parentesco = models.CharField(max_length=20, choices=PARENTESCO_CHOICES)
    data_nascimento = models.DateField(verbose_name="Data de Nascimento")
    cpf = models.CharField(max_length=14, blank=True, null=True, verbose_name="CPF")

    criado_em = models.DateTimeField(auto_now_add=True)
    atualizado_em = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['nome']
        verbose_name_plural = "Familiares"

    def __str__(self):
        return f"{self.nome} ({self.get_parentesco_display()})"

from django.contrib.auth.models import AbstractUser
from django.db import models

PAPEL_ADMIN = 'admin'
PAPEL_ASSOCIADO = 'associado'


# 1. Usuário do sistema (o "perfil": nome, email e se está ativo)
class CustomUser(AbstractUser):
    nome = models.CharField(max_length=150, blank=True, verbose_name="Nome")

    # O login é feito pelo email; o username só espelha o email normalizado
    def save(self, *args, **kwargs):
        if self.email:
            self.email = self.email.strip().lower()
            if not self.username:
                self.username = self.email
        super().save(*args, **kwargs)

    def __str__(self):
        return self.nome or self.email or self.username


# 2. Papel do usuário (tabela separada, como os registros de role do sistema)
class PapelUsuario(models.Model):
    PAPEL_CHOICES = [
        (PAPEL_ADMIN, 'Administrador'),
        (PAPEL_ASSOCIADO, 'Associado'),
    ]

    usuario = models.ForeignKey(CustomUser, on_delete=models.CASCADE, related_name='papeis')
    papel = models.CharField(max_length=20, choices=PAPEL_CHOICES)
    criado_em = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = "Papel do Usuário"
        verbose_name_plural = "Papéis dos Usuários"
        ordering = ['criado_em', 'id']

    def __str__(self):
        return f"{self.usuario} - {self.get_papel_display()}"

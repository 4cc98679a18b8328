from django.db.models.signals import post_delete
from django.dispatch import receiver

from .models import Associado
from .services import invalidar_familiares


@receiver(post_delete, sender=Associado)
def limpar_cache_familiares(sender, instance, **kwargs):
    """
    Ao excluir um associado o banco apaga os familiares em cascata;
    a lista em cache desse associado também precisa sair.
    """
    invalidar_familiares(instance.pk)

from django.core.management.base import BaseCommand, CommandError

from core.exceptions import ErroDominio
from core.models import PAPEL_ADMIN, PapelUsuario
from core.services import criar_usuario, atualizar_usuario
from django.contrib.auth import get_user_model


class Command(BaseCommand):
    help = 'Cria o primeiro administrador do clube (ou promove um usuário existente a admin)'

    def add_arguments(self, parser):
        parser.add_argument('--email', required=True)
        parser.add_argument('--senha', help='Obrigatória quando o usuário ainda não existe')
        parser.add_argument('--nome', default='Administrador')

    def handle(self, *args, **options):
        email = options['email'].strip().lower()
        User = get_user_model()
        existente = User.objects.filter(email=email).first()

        try:
            if existente:
                # Já existe: só troca o papel
                atualizar_usuario(existente.pk, papel=PAPEL_ADMIN)
                self.stdout.write(f"Usuário {email} promovido a admin.")
            else:
                if not options['senha']:
                    raise CommandError("Informe --senha para criar um novo usuário.")
                criar_usuario(email, options['senha'], options['nome'], PAPEL_ADMIN)
                self.stdout.write(f"Usuário {email} criado.")
        except ErroDominio as e:
            raise CommandError(e.mensagem)

        total = PapelUsuario.objects.filter(papel=PAPEL_ADMIN).count()
        self.stdout.write(self.style.SUCCESS(f'Pronto! {total} administrador(es) cadastrado(s).'))

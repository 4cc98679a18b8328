import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='Associado',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('nome_completo', models.CharField(max_length=150)),
                ('cpf', models.CharField(max_length=14, verbose_name='CPF')),
                ('rg', models.CharField(max_length=20, verbose_name='RG')),
                ('data_nascimento', models.DateField(verbose_name='Data de Nascimento')),
                ('endereco_rua', models.CharField(max_length=150, verbose_name='Rua/Av')),
                ('endereco_numero', models.CharField(max_length=20, verbose_name='Número')),
                ('endereco_complemento', models.CharField(blank=True, max_length=100, verbose_name='Complemento')),
                ('endereco_bairro', models.CharField(max_length=100, verbose_name='Bairro')),
                ('endereco_cidade', models.CharField(max_length=100, verbose_name='Cidade')),
                ('endereco_estado', models.CharField(max_length=2, verbose_name='UF')),
                ('endereco_cep', models.CharField(max_length=9, verbose_name='CEP')),
                ('contato_telefone', models.CharField(blank=True, max_length=20, verbose_name='Telefone')),
                ('contato_celular', models.CharField(max_length=20, verbose_name='Celular')),
                ('contato_email', models.EmailField(max_length=254, verbose_name='Email')),
                ('status', models.CharField(choices=[('ativo', 'Ativo'), ('inativo', 'Inativo')], default='ativo', max_length=10)),
                ('data_associacao', models.DateField(default=django.utils.timezone.localdate, verbose_name='Data de Associação')),
                ('observacoes', models.TextField(blank=True)),
                ('criado_em', models.DateTimeField(auto_now_add=True)),
                ('atualizado_em', models.DateTimeField(auto_now=True)),
            ],
            options={
                'ordering': ['nome_completo'],
            },
        ),
        migrations.CreateModel(
            name='Familiar',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('nome', models.CharField(max_length=150)),
                ('parentesco', models.CharField(choices=[('cônjuge', 'Cônjuge'), ('filho(a)', 'Filho(a)'), ('pai/mãe', 'Pai/Mãe'), ('irmão/irmã', 'Irmão/Irmã'), ('outro', 'Outro')], max_length=20)),
                ('data_nascimento', models.DateField(verbose_name='Data de Nascimento')),
                ('cpf', models.CharField(blank=True, max_length=14, null=True, verbose_name='CPF')),
                ('criado_em', models.DateTimeField(auto_now_add=True)),
                ('atualizado_em', models.DateTimeField(auto_now=True)),
                ('associado', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='familiares', to='cadastros_clube.associado')),
            ],
            options={
                'ordering': ['nome'],
                'verbose_name_plural': 'Familiares',
            },
        ),
    ]

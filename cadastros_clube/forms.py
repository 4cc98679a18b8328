from django import forms
from .models import Associado, Familiar


class AssociadoForm(forms.ModelForm):
    class Meta:
        model = Associado
        # Excluímos o que o usuário não deve mexer manualmente
        exclude = ['criado_em', 'atualizado_em']

        widgets = {
            # Datas
            'data_nascimento': forms.DateInput(attrs={'type': 'date', 'class': 'form-control'}, format='%Y-%m-%d'),
            'data_associacao': forms.DateInput(attrs={'type': 'date', 'class': 'form-control'}, format='%Y-%m-%d'),

            # Textos e Máscaras (Placeholder ajuda a saber o formato)
            'nome_completo': forms.TextInput(attrs={'class': 'form-control', 'placeholder': 'Nome Completo'}),
            'cpf': forms.TextInput(attrs={'class': 'form-control', 'placeholder': '000.000.000-00'}),
            'rg': forms.TextInput(attrs={'class': 'form-control'}),
            'contato_telefone': forms.TextInput(attrs={'class': 'form-control', 'placeholder': '(00) 0000-0000'}),
            'contato_celular': forms.TextInput(attrs={'class': 'form-control', 'placeholder': '(00) 90000-0000'}),
            'contato_email': forms.EmailInput(attrs={'class': 'form-control', 'placeholder': 'email@exemplo.com'}),

            # Endereço
            'endereco_cep': forms.TextInput(attrs={'class': 'form-control', 'placeholder': '00000-000'}),
            'endereco_rua': forms.TextInput(attrs={'class': 'form-control'}),
            'endereco_numero': forms.TextInput(attrs={'class': 'form-control'}),
            'endereco_complemento': forms.TextInput(attrs={'class': 'form-control'}),
            'endereco_bairro': forms.TextInput(attrs={'class': 'form-control'}),
            'endereco_cidade': forms.TextInput(attrs={'class': 'form-control'}),
            'endereco_estado': forms.TextInput(attrs={'class': 'form-control', 'maxlength': '2', 'style': 'text-transform:uppercase'}),

            'status': forms.Select(attrs={'class': 'form-select'}),
            'observacoes': forms.Textarea(attrs={'class': 'form-control', 'rows': 3}),
        }


class FamiliarForm(forms.ModelForm):
    class Meta:
        model = Familiar
        fields = ['nome', 'parentesco', 'data_nascimento', 'cpf']
        widgets = {
            'nome': forms.TextInput(attrs={'class': 'form-control'}),
            'parentesco': forms.Select(attrs={'class': 'form-select'}),
            'data_nascimento': forms.DateInput(attrs={'type': 'date', 'class': 'form-control'}, format='%Y-%m-%d'),
            'cpf': forms.TextInput(attrs={'class': 'form-control', 'placeholder': 'Opcional'}),
        }

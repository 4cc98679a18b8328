from django import forms
from django.conf import settings

from .models import PapelUsuario


class LoginForm(forms.Form):
    email = forms.EmailField(label="Email", widget=forms.EmailInput(attrs={'class': 'form-control', 'placeholder': 'seu@email.com'}))
    senha = forms.CharField(label="Senha", widget=forms.PasswordInput(attrs={'class': 'form-control'}))


class CadastroForm(forms.Form):
    nome = forms.CharField(label="Nome", max_length=150, widget=forms.TextInput(attrs={'class': 'form-control'}))
    email = forms.EmailField(label="Email", widget=forms.EmailInput(attrs={'class': 'form-control'}))
    senha = forms.CharField(label="Senha", widget=forms.PasswordInput(attrs={'class': 'form-control'}))


class UsuarioSistemaForm(forms.Form):
    nome = forms.CharField(label="Nome", max_length=150, widget=forms.TextInput(attrs={'class': 'form-control'}))
    email = forms.EmailField(label="Email", widget=forms.EmailInput(attrs={'class': 'form-control'}))
    senha = forms.CharField(label="Senha", widget=forms.PasswordInput(attrs={'class': 'form-control'}))
    papel = forms.ChoiceField(label="Papel", choices=PapelUsuario.PAPEL_CHOICES, widget=forms.Select(attrs={'class': 'form-select'}))

    def clean_senha(self):
        # Barra a senha curta antes de chamar a criação
        senha = self.cleaned_data['senha']
        if len(senha) < settings.SENHA_TAMANHO_MINIMO:
            raise forms.ValidationError("A senha deve ter no mínimo 6 caracteres.")
        return senha


class EditarUsuarioForm(forms.Form):
    nome = forms.CharField(label="Nome", max_length=150, widget=forms.TextInput(attrs={'class': 'form-control'}))
    papel = forms.ChoiceField(label="Papel", choices=PapelUsuario.PAPEL_CHOICES, widget=forms.Select(attrs={'class': 'form-select'}))
    ativo = forms.BooleanField(label="Ativo", required=False)

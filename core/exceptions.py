"""Erros de domínio do sistema.

Cada erro carrega a mensagem que vai para o usuário e o status HTTP usado
pelos endpoints JSON. As views transformam esses erros em mensagens
(django.contrib.messages) ou erros de formulário.
"""


class ErroDominio(Exception):
    status = 500

    def __init__(self, mensagem, status=None):
        super().__init__(mensagem)
        self.mensagem = mensagem
        if status is not None:
            self.status = status

    def __str__(self):
        return self.mensagem


class ErroValidacao(ErroDominio):
    """Dados inválidos, barrados antes de qualquer gravação."""
    status = 400


class ErroAutorizacao(ErroDominio):
    status = 403


class ErroNaoEncontrado(ErroDominio):
    status = 400


class ErroRestricao(ErroDominio):
    """Violação de restrição do banco (ex: categoria ainda usada em lançamentos)."""
    status = 400


class ErroConexao(ErroDominio):
    status = 500


class ErroAtribuicaoPapel(ErroDominio):
    status = 500

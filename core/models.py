import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Optional

from core.bancos import NOMES_BANCOS, nome_banco
from core.config import Config
from core.logger import logger
from services.svg_renderer import RenderizadorSVG
from utils.checksum import modulo11
from utils.helpers import somente_digitos, formatar_linha_digitavel, formatar_centavos
from utils.itf import codificar

TAMANHO_LINHA = 47

# 1997-10-07 12:00:00 GMT-0300, a data base do fator de vencimento
FUSO_BRASILIA = timezone(timedelta(hours=-3))
DATA_BASE = datetime(1997, 10, 7, 12, 0, tzinfo=FUSO_BRASILIA)


@dataclass(frozen=True)
class Moeda:
    codigo: str
    simbolo: str
    decimal: str


BRL = Moeda(codigo="BRL", simbolo="R$", decimal=",")


class BoletoInvalidoError(ValueError):
    """Linha digitável com tamanho errado ou dígito verificador que não confere."""

    def __init__(self, mensagem, numero):
        super().__init__(mensagem)
        self.mensagem = mensagem
        self.numero = numero


def linha_para_codigo_barras(digitos):
    """
    A linha digitável é um rearranjo do código de barras com três dígitos
    verificadores a mais (um por campo). Aqui o processo é desfeito:
    AAAA BBBBB x CCCCCCCCCC x DDDDDDDDDD x EEEEEEEEEEEEEEE -> AAAA E B C D
    """
    return re.sub(
        r'^(\d{4})(\d{5})\d(\d{10})\d(\d{10})\d(\d{15})$',
        r'\1\5\2\3\4',
        digitos
    )


def validar_linha_digitavel(digitos):
    """
    Confere se a linha tem 47 dígitos e se o dígito verificador geral
    (5ª posição do código de barras) bate com o módulo 11 dos outros 43.
    """
    if len(digitos) != TAMANHO_LINHA or somente_digitos(digitos) != digitos:
        return False

    codigo = linha_para_codigo_barras(digitos)
    sem_dv = codigo[:4] + codigo[5:]
    return str(modulo11(sem_dv)) == codigo[4]


@dataclass(frozen=True)
class Boleto:
    """
    Representação de um boleto bancário a partir da sua linha digitável.
    A linha é limpa e validada na criação; depois disso o objeto é imutável
    e todos os campos são derivados dela.
    """
    linha_digitavel: str

    def __post_init__(self):
        digitos = somente_digitos(self.linha_digitavel)
        object.__setattr__(self, 'linha_digitavel', digitos)

        if not validar_linha_digitavel(digitos):
            logger.warning(f"⚠️ Linha digitável rejeitada: {digitos}")
            raise BoletoInvalidoError("Linha digitável inválida", digitos)

    def valido(self):
        return validar_linha_digitavel(self.linha_digitavel)

    def codigo_barras(self):
        return linha_para_codigo_barras(self.linha_digitavel)

    def numero(self):
        return self.linha_digitavel

    def numero_formatado(self):
        return formatar_linha_digitavel(self.linha_digitavel)

    def banco(self, diretorio=NOMES_BANCOS):
        """Nome do banco emissor, ou 'Unknown' se o código não estiver no diretório."""
        return nome_banco(self.codigo_barras()[:3], diretorio)

    def moeda(self) -> Optional[Moeda]:
        """
        O 4º dígito do código de barras identifica a moeda. Só o código 9
        (Real) é conhecido; qualquer outro retorna None.
        """
        if self.codigo_barras()[3] == '9':
            return BRL
        return None

    def digito_verificador(self):
        return self.codigo_barras()[4]

    def vencimento(self) -> datetime:
        """
        Do 6º ao 9º dígito do código de barras está o número de dias desde
        07/10/1997 até o vencimento.
        """
        dias = int(self.codigo_barras()[5:9])
        return DATA_BASE + timedelta(days=dias)

    def _centavos(self):
        return int(self.codigo_barras()[9:19])

    def valor(self):
        return formatar_centavos(self._centavos())

    def valor_decimal(self) -> Decimal:
        return Decimal(self.valor())

    def valor_formatado(self):
        moeda = self.moeda()
        if moeda is None:
            return self.valor()
        return f"{moeda.simbolo} {self.valor().replace('.', moeda.decimal)}"

    def _renderizador(self, largura_listra):
        if largura_listra is None:
            largura_listra = Config.LARGURA_LISTRA
        return RenderizadorSVG(codificar(self.codigo_barras()), largura_listra)

    def svg(self, largura_listra=None):
        """Código de barras do boleto em SVG (string)."""
        return self._renderizador(largura_listra).renderizar()

    def svg_em(self, raiz, seletor, largura_listra=None):
        """Anexa o SVG do código de barras ao elemento `seletor` (XPath) da árvore `raiz`."""
        self._renderizador(largura_listra).renderizar_em(raiz, seletor)

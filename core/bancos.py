"""
Mapeamento de códigos bancários (3 primeiros dígitos do código de barras)
para o nome das instituições mais comuns.

A lista não é completa. A relação oficial pode ser consultada em
http://www.buscabanco.org.br/AgenciasBancos.asp
"""
from types import MappingProxyType

BANCO_DESCONHECIDO = "Unknown"

NOMES_BANCOS = MappingProxyType({
    "001": "Banco do Brasil",
    "007": "BNDES",
    "033": "Santander",
    "069": "Crefisa",
    "077": "Banco Inter",
    "102": "XP Investimentos",
    "104": "Caixa Econômica Federal",
    "140": "Easynvest",
    "197": "Stone",
    "208": "BTG Pactual",
    "212": "Banco Original",
    "237": "Bradesco",
    "260": "Nu Pagamentos",
    "341": "Itaú",
    "389": "Banco Mercantil do Brasil",
    "422": "Banco Safra",
    "505": "Credit Suisse",
    "633": "Banco Rendimento",
    "652": "Itaú Unibanco",
    "735": "Banco Neon",
    "739": "Banco Cetelem",
    "745": "Citibank",
})


def nome_banco(codigo, diretorio=NOMES_BANCOS):
    """Retorna o nome do banco ou 'Unknown' quando o código não está mapeado."""
    return diretorio.get(codigo, BANCO_DESCONHECIDO)

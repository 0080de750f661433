import re
from core.logger import logger
from core.models import Boleto, validar_linha_digitavel
from utils.helpers import somente_digitos

# Linha digitável de boleto bancário, com ou sem pontos e espaços
REGEX_LINHA = r'\d{5}[\.\s]?\d{5}[\.\s]?\d{5}[\.\s]?\d{6}[\.\s]?\d{5}[\.\s]?\d{6}[\.\s]?\d[\.\s]?\d{14}'


def extrair_linha_digitavel(texto):
    """
    Procura em qualquer texto (corpo de e-mail, texto de PDF, etc.) a
    primeira linha digitável válida e retorna apenas os seus dígitos.
    """
    if not texto:
        return None

    for match in re.finditer(REGEX_LINHA, texto):
        candidata = somente_digitos(match.group(0))
        if validar_linha_digitavel(candidata):
            return candidata
        logger.debug(f"Candidata descartada (DV não confere): {candidata}")

    return None


def localizar_boleto(texto):
    """Mesmo que extrair_linha_digitavel, mas já devolve o Boleto montado."""
    linha = extrair_linha_digitavel(texto)
    if linha is None:
        return None
    return Boleto(linha)

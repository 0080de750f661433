import re
from core.logger import logger


def somente_digitos(texto):
    """Remove qualquer caractere que não seja número (pontos, espaços, barras)."""
    return re.sub(r'[^0-9]', '', texto or '')


def formatar_linha_digitavel(digitos):
    """
    Aplica a máscara usual da linha digitável:
    00000.00000 00000.000000 00000.000000 0 00000000000000
    """
    return re.sub(
        r'^(\d{5})(\d{5})(\d{5})(\d{6})(\d{5})(\d{6})(\d)(\d{14})$',
        r'\1.\2 \3.\4 \5.\6 \7 \8',
        digitos
    )


def formatar_centavos(centavos):
    """Converte centavos inteiros para string com 2 casas decimais (ex: 12345 -> '123.45')."""
    return f"{centavos // 100}.{centavos % 100:02d}"


def exibir_resumo_boleto(boleto):
    """
    Exibe um resumo do boleto decodificado no console.
    Útil para debug e acompanhamento manual.
    """
    moeda = boleto.moeda()

    logger.info("═" * 60)
    logger.info(f"🔢 LINHA: {boleto.numero_formatado()}")
    logger.info(f"🏦 BANCO: {boleto.banco()}")
    logger.info(f"💱 MOEDA: {moeda.codigo if moeda else 'Desconhecida'}")
    logger.info(f"💸 VALOR: {boleto.valor_formatado()}")
    logger.info(f"📅 VENCIMENTO: {boleto.vencimento().strftime('%d/%m/%Y')}")
    logger.info(f"🧾 CÓDIGO DE BARRAS: {boleto.codigo_barras()}")
    logger.info("═" * 60)

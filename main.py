import argparse
import sys

from core.config import Config
from core.logger import logger
from core.models import Boleto, BoletoInvalidoError
from utils.helpers import exibir_resumo_boleto


def processar_linha(linha, gerar_svg=False, largura_listra=None):
    """
    Decodifica a linha digitável, exibe o resumo e, se pedido,
    retorna o SVG do código de barras.
    """
    boleto = Boleto(linha)
    exibir_resumo_boleto(boleto)

    if gerar_svg:
        return boleto.svg(largura_listra)
    return None


def main(argv=None):
    parser = argparse.ArgumentParser(description="Decodifica e valida a linha digitável de um boleto.")
    parser.add_argument("linha", nargs="+", help="Linha digitável (pode conter pontos e espaços)")
    parser.add_argument("--svg", action="store_true", help="Escreve o código de barras em SVG na saída padrão")
    parser.add_argument("--largura", type=float, default=Config.LARGURA_LISTRA,
                        help="Largura de uma listra simples no SVG")
    args = parser.parse_args(argv)

    try:
        svg = processar_linha(" ".join(args.linha), gerar_svg=args.svg, largura_listra=args.largura)
    except BoletoInvalidoError as e:
        logger.error(f"❌ {e.mensagem}: {e.numero}")
        return 1

    if svg:
        sys.stdout.write(svg + "\n")

    logger.info("✅ Boleto decodificado.")
    return 0


if __name__ == "__main__":
    sys.exit(main())

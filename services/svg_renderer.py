from dataclasses import dataclass
from lxml import etree
from core.logger import logger

SVG_NS = "http://www.w3.org/2000/svg"
ALTURA = 100
PRETO = '#000000'
BRANCO = '#ffffff'


@dataclass(frozen=True)
class Retangulo:
    """Instrução de desenho de uma única listra do código de barras."""
    x: float
    y: float
    largura: float
    altura: float
    cor: str


def _numero(valor):
    # 4.0 -> "4" para manter os atributos do SVG limpos
    if isinstance(valor, float) and valor.is_integer():
        valor = int(valor)
    return str(valor)


class RenderizadorSVG:
    """
    Desenha uma sequência de pesos como listras verticais em SVG.

    As listras são colocadas da esquerda para a direita, alternando entre
    preto e branco, e a largura de cada uma é o peso multiplicado pela
    largura de uma listra simples.
    """

    def __init__(self, listras, largura_listra=4):
        self.listras = [int(peso) for peso in listras]
        self.largura_listra = largura_listra

    @staticmethod
    def cor(i):
        """Índices pares são pretos, ímpares são brancos."""
        return BRANCO if i % 2 else PRETO

    def largura_viewbox(self):
        return sum(self.listras) * self.largura_listra

    def retangulos(self):
        """Lista de instruções de desenho, na ordem das listras."""
        resultado = []
        posicao = 0
        for i, peso in enumerate(self.listras):
            largura = self.largura_listra * peso
            resultado.append(Retangulo(x=posicao, y=0, largura=largura, altura=ALTURA, cor=self.cor(i)))
            posicao += largura
        return resultado

    def _montar_svg(self):
        svg = etree.Element(f"{{{SVG_NS}}}svg", nsmap={None: SVG_NS})
        svg.set("width", "100%")
        svg.set("height", "100%")
        svg.set("viewBox", f"0 0 {_numero(self.largura_viewbox())} {ALTURA}")

        for ret in self.retangulos():
            rect = etree.SubElement(svg, f"{{{SVG_NS}}}rect")
            rect.set("width", _numero(ret.largura))
            rect.set("height", _numero(ret.altura))
            rect.set("fill", ret.cor)
            rect.set("x", _numero(ret.x))
            rect.set("y", _numero(ret.y))
        return svg

    def renderizar(self):
        """Retorna o SVG serializado como string."""
        return etree.tostring(self._montar_svg(), encoding="unicode")

    def renderizar_em(self, raiz, seletor):
        """
        Anexa o SVG ao primeiro elemento encontrado pela expressão XPath
        `seletor` dentro da árvore `raiz`. Se nada for encontrado, não faz nada.
        """
        encontrados = [el for el in raiz.xpath(seletor) if etree.iselement(el)]
        if not encontrados:
            logger.debug(f"Seletor '{seletor}' não encontrou nenhum elemento, SVG não anexado")
            return None

        encontrados[0].append(self._montar_svg())
        return None

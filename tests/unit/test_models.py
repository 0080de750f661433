import re
from datetime import datetime
from decimal import Decimal

import pytest
from lxml import etree

from core.models import (
    Boleto, BoletoInvalidoError, BRL, DATA_BASE, FUSO_BRASILIA, Moeda,
    linha_para_codigo_barras, validar_linha_digitavel,
)
from utils.checksum import modulo11

BOLETO_VALIDO = '23793.38128 86000.000009 00000.000380 1 84660000012345'
BOLETO_LIMPO = '23793381288600000000900000000380184660000012345'
CODIGO_BARRAS = '23791846600000123453381286000000000000000038'
# mesmo boleto com o dígito verificador geral trocado de 1 para 2
BOLETO_DV_ERRADO = '23793381288600000000900000000380284660000012345'


@pytest.fixture
def boleto():
    return Boleto(BOLETO_VALIDO)


def test_remove_formatacao_da_linha(boleto):
    assert boleto.linha_digitavel == BOLETO_LIMPO


def test_linha_limpa_e_formatada_geram_o_mesmo_boleto(boleto):
    assert Boleto(BOLETO_LIMPO) == boleto
    assert Boleto(BOLETO_LIMPO).numero() == boleto.numero()


def test_tamanho_errado_e_rejeitado():
    with pytest.raises(BoletoInvalidoError) as exc:
        Boleto('1234567890')

    assert exc.value.numero == '1234567890'
    assert exc.value.mensagem == 'Linha digitável inválida'


def test_dv_errado_e_rejeitado():
    with pytest.raises(BoletoInvalidoError) as exc:
        Boleto(BOLETO_DV_ERRADO)

    assert exc.value.numero == BOLETO_DV_ERRADO


def test_erro_carrega_digitos_sem_formatacao():
    with pytest.raises(BoletoInvalidoError) as exc:
        Boleto('12345.67890')
    assert exc.value.numero == '1234567890'


def test_erro_e_um_value_error():
    with pytest.raises(ValueError):
        Boleto('')


def test_validar_linha_digitavel():
    assert validar_linha_digitavel(BOLETO_LIMPO) is True
    assert validar_linha_digitavel(BOLETO_DV_ERRADO) is False
    assert validar_linha_digitavel('123') is False
    assert validar_linha_digitavel(BOLETO_VALIDO) is False


def test_valido(boleto):
    assert boleto.valido() is True


def test_codigo_barras(boleto):
    assert boleto.codigo_barras() == CODIGO_BARRAS
    assert linha_para_codigo_barras(BOLETO_LIMPO) == CODIGO_BARRAS


def test_dv_do_codigo_de_barras_confere(boleto):
    codigo = boleto.codigo_barras()
    assert str(modulo11(codigo[:4] + codigo[5:])) == codigo[4]


def test_numero_e_numero_formatado(boleto):
    assert boleto.numero() == BOLETO_LIMPO
    assert boleto.numero_formatado() == BOLETO_VALIDO
    assert re.fullmatch(r'\d{5}\.\d{5} \d{5}\.\d{6} \d{5}\.\d{6} \d \d{14}', boleto.numero_formatado())


def test_banco(boleto):
    assert boleto.banco() == 'Bradesco'


def test_banco_desconhecido_e_diretorio_injetado(boleto):
    assert boleto.banco(diretorio={}) == 'Unknown'
    assert boleto.banco(diretorio={'237': 'BCO BRADESCO S.A.'}) == 'BCO BRADESCO S.A.'


def test_moeda(boleto):
    assert boleto.moeda() == Moeda(codigo='BRL', simbolo='R$', decimal=',')
    assert boleto.moeda() is BRL


def test_digito_verificador(boleto):
    assert boleto.digito_verificador() == '1'
    assert boleto.digito_verificador() == boleto.codigo_barras()[4]


def test_vencimento(boleto):
    vencimento = boleto.vencimento()

    assert vencimento == datetime(2020, 12, 11, 12, 0, tzinfo=FUSO_BRASILIA)
    assert vencimento > DATA_BASE


def test_data_base_em_milissegundos():
    assert int(DATA_BASE.timestamp() * 1000) == 876236400000


def test_valor(boleto):
    assert boleto.valor() == '123.45'
    assert boleto.valor_decimal() == Decimal('123.45')


def test_valor_formatado(boleto):
    assert boleto.valor_formatado() == 'R$ 123,45'


def test_svg(boleto):
    resultado = boleto.svg(largura_listra=4)

    assert '<svg' in resultado
    assert resultado.count('<rect') == 227
    # início (4) + 22 pares de 14 unidades + fim (4) = 316 unidades
    assert 'viewBox="0 0 1264 100"' in resultado


def test_svg_em(boleto):
    raiz = etree.fromstring('<html><body><div id="barcode"/></body></html>')

    assert boleto.svg_em(raiz, '//div[@id="barcode"]', largura_listra=4) is None
    assert len(raiz.find('.//div')) == 1


def test_boleto_e_imutavel(boleto):
    with pytest.raises(AttributeError):
        boleto.linha_digitavel = BOLETO_DV_ERRADO


def test_acessores_sao_idempotentes(boleto):
    for _ in range(3):
        assert boleto.codigo_barras() == CODIGO_BARRAS
        assert boleto.banco() == 'Bradesco'
        assert boleto.valor() == '123.45'
        assert boleto.vencimento() == datetime(2020, 12, 11, 12, 0, tzinfo=FUSO_BRASILIA)
    assert boleto.linha_digitavel == BOLETO_LIMPO


def test_moeda_desconhecida():
    # mesmo boleto com código de moeda 0 (DV geral recalculado para 3)
    boleto = Boleto('23703.38127 86000.000009 00000.000380 3 84660000012345')

    assert boleto.codigo_barras() == '23703846600000123453381286000000000000000038'
    assert boleto.moeda() is None
    assert boleto.valor_formatado() == '123.45'

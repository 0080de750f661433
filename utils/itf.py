"""
Codificação Interleaved 2 of 5 (ITF), a simbologia impressa nos boletos.

O resultado é uma string de pesos ('1' estreita, '2' larga) em que as
posições pares são barras pretas e as ímpares espaços brancos.
"""

# Representação de cada dígito decimal (índice = dígito)
PESOS = (
    '11221',  # 0
    '21112',  # 1
    '12112',  # 2
    '22111',  # 3
    '11212',  # 4
    '21211',  # 5
    '12211',  # 6
    '11122',  # 7
    '21121',  # 8
    '12121',  # 9
)

INICIO = '1111'
FIM = '211'


def intercalar_par(par):
    """
    Converte um par de dígitos na sua representação ITF intercalada.
    O primeiro dígito define as barras pretas e o segundo os espaços brancos.

    Um grupo de um único dígito é lido como número, então '5' equivale a '05'.
    Ex: intercalar_par('01') -> '1211212112'
    """
    preto, branco = divmod(int(par), 10)
    pesos_preto, pesos_branco = PESOS[preto], PESOS[branco]
    return ''.join(p + b for p, b in zip(pesos_preto, pesos_branco))


def codificar(numero):
    """Codifica uma string de dígitos em ITF, incluindo os marcadores de início e fim."""
    pares = [numero[i:i + 2] for i in range(0, len(numero), 2)]
    return INICIO + ''.join(intercalar_par(par) for par in pares) + FIM

def modulo11(digitos):
    """
    Calcula o dígito verificador módulo 11 usado no código de barras do boleto.

    Os dígitos são percorridos da direita para a esquerda com pesos 2 a 9,
    reiniciando em 2 após o 9. O resultado 0 (ou 10) vira 1, já que o
    dígito verificador geral nunca é zero.
    Especificação: https://portal.febraban.org.br/pagina/3166/33/pt-br/layour-arrecadacao

    Aceita uma string ou qualquer sequência de caracteres numéricos.
    Ex: modulo11('123456789') -> 7
    """
    soma = 0
    for i, digito in enumerate(reversed(list(digitos))):
        soma += ((i % 8) + 2) * int(digito)

    return (11 - (soma % 11)) % 10 or 1

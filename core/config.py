import os
from dotenv import load_dotenv

# Carrega as variáveis do arquivo .env
load_dotenv()


class Config:
    # --- LOGS ---
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    # --- RENDERIZAÇÃO DO CÓDIGO DE BARRAS ---
    # Largura de uma listra de peso 1 (as largas têm o dobro)
    LARGURA_LISTRA = float(os.getenv("BOLETO_LARGURA_LISTRA", "4"))

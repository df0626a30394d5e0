# domain/entities/trade.py
from pydantic import BaseModel, ConfigDict, Field

# Limite de um inteiro de 64 bits com sinal
MAX_TIMESTAMP = 2**63 - 1

class TradeRecord(BaseModel):
    """Representa um único negócio lido de uma linha do arquivo de entrada."""
    model_config = ConfigDict(frozen=True)

    timestamp: int = Field(ge=0, le=MAX_TIMESTAMP)
    instrument: str
    quantity: float = Field(ge=0, allow_inf_nan=False)
    price: float = Field(ge=0, allow_inf_nan=False)

    def __str__(self) -> str:
        return f"{self.timestamp},{self.instrument},{self.quantity:g},{self.price:g}"

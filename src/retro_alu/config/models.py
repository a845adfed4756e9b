from dataclasses import dataclass, field
from typing import List, Optional

from retro_alu.common.types import AluVector
from retro_alu.core.alu import AluOp

@dataclass
class VectorConfig:
    a: int
    op: AluOp
    b: int = 0x00  # シフト演算では無視される

    def to_vector(self) -> AluVector:
        return AluVector(self.a, self.b, self.op)

@dataclass
class HarnessConfig:
    title: Optional[str] = None  # バナーの上書き (Noneなら既定のバナー)
    vectors: List[VectorConfig] = field(default_factory=list)

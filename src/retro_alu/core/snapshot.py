# retro_alu/core/snapshot.py
"""
評価結果の不変スナップショット

このモジュールは、ALUの1回分の評価（入力と出力）を記録した不変のデータ構造を定義します。
Presenterへの情報提供と、ハーネスの実行履歴の記録に用いる責務を負います。
"""
from dataclasses import dataclass

from retro_alu.common.types import AluVector, Byte
from retro_alu.core.alu import AluFlags, AluOp

# @intent:responsibility ある1回の評価における入力オペランド、演算、結果、フラグを不変に記録します。
@dataclass(frozen=True) # 不変データ構造
class Evaluation:
    """
    ALUの1回分の評価を記録した不変のデータ構造。
    """
    a: Byte
    b: Byte
    op: AluOp
    result: Byte
    flags: AluFlags

    # @intent:responsibility この評価の入力をベクタとして返します。再評価に使用できます。
    @property
    def vector(self) -> AluVector:
        return AluVector(self.a, self.b, self.op)

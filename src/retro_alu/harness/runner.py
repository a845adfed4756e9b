# retro_alu/harness/runner.py
"""
テストハーネスモジュール。

オペランドと演算の組（ベクタ）の列をALUコアに1件ずつ投入し、
その評価結果を実行履歴として保持する責務を負います。
"""
from typing import Iterable, List, Optional

from retro_alu.common.types import AluVector
from retro_alu.core.alu import AluOp, evaluate
from retro_alu.core.snapshot import Evaluation

# @intent:data_structure デモンストレーション用の既定ベクタ。各演算を1回ずつ実行します。
DEFAULT_VECTORS: List[AluVector] = [
    AluVector(15, 27, AluOp.ADD),
    AluVector(10, 40, AluOp.SUB),
    AluVector(0xF0, 0x0F, AluOp.AND),
    AluVector(0xF0, 0x0F, AluOp.OR),
    AluVector(0x55, 0xFF, AluOp.XOR),
    AluVector(0x81, 0x00, AluOp.SHL),
    AluVector(0x03, 0x00, AluOp.SHR),
]

# @intent:responsibility ベクタ列をALUコアで評価し、評価履歴を管理します。
class AluHarness:
    """
    ベクタ列を順にALUへ投入するドライバ。
    ALUコア自体は状態を持たないため、ここで保持するのは表示用の履歴のみです。
    vectors が None の場合は DEFAULT_VECTORS を使用し、空のリストはそのまま空として扱います。
    """
    def __init__(self, vectors: Optional[Iterable[AluVector]] = None):
        self._vectors: List[AluVector] = list(DEFAULT_VECTORS) if vectors is None else list(vectors)
        self._history: List[Evaluation] = []

    def get_vectors(self) -> List[AluVector]:
        """
        実行対象のベクタ列を返します。
        """
        return list(self._vectors)

    # @intent:responsibility 1件のベクタを評価し、その結果を履歴に追加して返します。
    def run_vector(self, vector: AluVector) -> Evaluation:
        a, b, op = vector
        result, flags = evaluate(a, b, op)
        evaluation = Evaluation(a=a, b=b, op=op, result=result, flags=flags)
        self._history.append(evaluation)
        return evaluation

    # @intent:responsibility 全ベクタを順に1回ずつ評価し、今回の評価結果を返します。
    def run(self) -> List[Evaluation]:
        return [self.run_vector(vector) for vector in self._vectors]

    def get_history(self) -> List[Evaluation]:
        """
        これまでに実行された評価の履歴を古い順に返します。
        """
        return list(self._history)

    def clear_history(self) -> None:
        self._history.clear()

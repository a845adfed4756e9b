"""
共通の型定義を提供するモジュール。
プロジェクト全体で使用される汎用的な型エイリアスなどを定義します。
"""
from typing import Dict, NamedTuple, TYPE_CHECKING

if TYPE_CHECKING:
    from retro_alu.core.alu import AluOp

# @intent:data_structure 8ビット符号なし値（0..255）の型エイリアス。オペランドと演算結果の双方に使用します。
Byte = int

# @intent:data_structure フラグ名と状態をマッピングする辞書の型エイリアス。
# Presenter など表示系のレイヤーで共通して使用されます。
FlagMap = Dict[str, bool]

# @intent:data_structure ドライバがALUへ投入する1組の入力（オペランドA, B, 演算）。
class AluVector(NamedTuple):
    a: Byte
    b: Byte
    op: "AluOp"

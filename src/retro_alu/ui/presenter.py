# retro_alu/ui/presenter.py
"""
評価結果をテキストとして整形する Presenter。
シフト演算は単項演算のため、オペランドBを表示しません。
"""
from typing import Iterable, Optional

from retro_alu.core.alu import AluFlags, AluOp
from retro_alu.core.snapshot import Evaluation

DEFAULT_TITLE = "8-bit ALU with Status Flags (Simulation Mode)"
FOOTER = "End of ALU demonstration."

# @intent:responsibility 演算種別を表示用のニーモニックに変換します。
def op_to_string(op: AluOp) -> str:
    return op.value

# @intent:responsibility フラグを "Z=0 C=1 N=0 V=0" 形式で整形します。
def format_flags(flags: AluFlags) -> str:
    return " ".join(f"{name}={int(state)}" for name, state in flags.as_dict().items())

# @intent:responsibility 1件の評価結果を1行のテキストに整形します。
def format_evaluation(evaluation: Evaluation) -> str:
    mnemonic = op_to_string(evaluation.op)
    flags = format_flags(evaluation.flags)
    if evaluation.op.is_shift:
        return f"{mnemonic}  0x{evaluation.a:02X} -> 0x{evaluation.result:02X}  | {flags}"
    return (f"{mnemonic}  0x{evaluation.a:02X} , 0x{evaluation.b:02X}"
            f" -> 0x{evaluation.result:02X}  | {flags}")

# @intent:responsibility バナー、各評価行、フッタから成るレポート全体を生成します。
def render_report(evaluations: Iterable[Evaluation], title: Optional[str] = None) -> str:
    """
    評価結果の一覧をデモンストレーション形式のレポート文字列に整形します。
    """
    lines = [DEFAULT_TITLE if title is None else title, "-" * 48, ""]
    lines.extend(format_evaluation(ev) for ev in evaluations)
    lines.extend(["", FOOTER])
    return "\n".join(lines) + "\n"

# retro_alu/ui/app.py
"""
コマンドラインアプリケーションのエントリポイント。
ベクタを読み込んでALUで評価し、レポートを標準出力へ表示します。
"""
import argparse
import sys
from typing import List, Optional

import yaml

from retro_alu.config.loader import ConfigLoader
from retro_alu.harness.runner import AluHarness
from .presenter import render_report

def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="retro-alu",
        description="8-bit ALU with status flags (simulation mode)")
    parser.add_argument("-c", "--config", default=None,
                        help="YAML file with the vectors to evaluate (default: built-in demo vectors)")
    return parser

# @intent:responsibility 引数を解析し、ベクタの評価結果をレポートとして表示します。
def main(argv: Optional[List[str]] = None) -> int:
    """
    アプリケーションのメイン関数。終了コードを返します。
    """
    args = _build_parser().parse_args(argv)

    title = None
    vectors = None
    if args.config:
        try:
            config = ConfigLoader().load_from_file(args.config)
        except (ValueError, OSError, yaml.YAMLError) as e:
            print(f"Error: Failed to load config '{args.config}': {e}", file=sys.stderr)
            return 1
        title = config.title
        # ベクタが空の設定ファイルは既定のデモベクタで実行する
        vectors = [v.to_vector() for v in config.vectors] or None

    harness = AluHarness(vectors)
    sys.stdout.write(render_report(harness.run(), title=title))
    return 0

if __name__ == '__main__':
    sys.exit(main())

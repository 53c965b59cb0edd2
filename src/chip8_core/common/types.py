"""
共通の型定義を提供するモジュール。
プロジェクト全体で使用される汎用的な型エイリアスなどを定義します。
"""
from typing import Tuple

# @intent:data_structure ホストへ渡す画面の読み取り専用ビュー。行優先 (index = x + width * y)。
DisplayView = Tuple[bool, ...]

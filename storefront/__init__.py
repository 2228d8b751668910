"""Rainy Days ストアフロントのカートコアパッケージ."""
from . import domain

# infrastructure は requests / boto3 に依存するため、
# 必要な場所で明示的にインポートする
# from . import infrastructure

__all__ = ["domain"]

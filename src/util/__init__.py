"""
どこで: `util` パッケージ。
何を: 設定ファイル読込と色表現変換の小さなヘルパ群。
"""

"""
どこで: `engine.core` サブパッケージ。
何を: 2D 領域 `Region` と、その押し出し `Solid` / 集合 `Scene` を提供。
なぜ: 形状の生成・加工・積層を同じ値型の上で組み立てられるようにするため。
"""

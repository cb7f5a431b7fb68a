#!/usr/bin/env python3
"""
Nano Chunker - 快速开始示例

这个示例展示了：
1. 递归分割器的基础用法
2. 按token计数的分割
3. 文档批量分块与CSV导出
"""

from nano_chunker import (
    RecursiveCharacterTextSplitter,
    SplitterConfig,
    TokenTextSplitter,
    export_chunks_as_csv,
    format_chunk_table,
    get_chunks,
    tiktoken_length_function,
)

DOCUMENT = """人工智能是计算机科学的一个分支，致力于创建能够执行通常需要人类智能的任务的机器和程序。

机器学习是人工智能的一个子领域。它使用算法和统计模型来分析和学习数据，从而在没有明确编程的情况下提高任务性能。
常见的机器学习方法包括监督学习、无监督学习和强化学习。

深度学习是机器学习的一个子集，使用多层神经网络来学习数据的表示。"""


def basic_example():
    """基础使用示例"""
    print("=== 递归分割 ===")

    splitter = RecursiveCharacterTextSplitter(
        chunk_size=60,
        separators=["\n\n", "\n", "。", "，", ""],
        keep_separator=True,
    )
    chunks = splitter.split_text(DOCUMENT)

    print(f"Number of chunks: {len(chunks)}")
    print(format_chunk_table(chunks))


def token_example():
    """按token计数的示例（需要下载tiktoken编码文件）"""
    print("\n=== 按token分割 ===")

    config = SplitterConfig(chunk_size=40, length_function=tiktoken_length_function("gpt-4o"))
    recursive_chunks = RecursiveCharacterTextSplitter(config).split_text(DOCUMENT)
    print(f"递归分割（token计数）: {len(recursive_chunks)} 个文本块")

    window_chunks = TokenTextSplitter(chunk_size=40, chunk_overlap=8).split_text(DOCUMENT)
    print(f"token窗口分割: {len(window_chunks)} 个文本块")


def batch_example():
    """批量分块与导出示例"""
    print("\n=== 批量分块 ===")

    splitter = RecursiveCharacterTextSplitter(chunk_size=80)
    inserting_chunks = get_chunks({"doc-ai": {"content": DOCUMENT}}, splitter)
    for chunk_id, chunk in inserting_chunks.items():
        print(chunk_id, chunk["chunk_order_index"], chunk["length"])

    output_path = export_chunks_as_csv(splitter.split_text(DOCUMENT), "./nano_chunker_output/chunks.csv")
    print(f"✅ 已导出: {output_path}")


if __name__ == "__main__":
    basic_example()
    token_example()
    batch_example()

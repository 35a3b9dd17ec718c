#!/usr/bin/env python
"""
批量分词脚本
从文本文件读取（每行一条），分词并标注，输出词性分布和示例结果
"""
import json
import sys
from collections import Counter
from pathlib import Path
from datetime import datetime

# 添加项目根目录到 path
sys.path.insert(0, str(Path(__file__).parent.parent))

from config import settings
from core.exceptions import ResourceLoadError
from core.pipeline import TokenizePipeline
from services.resource_manager import ResourceManager


def load_texts(path: str) -> list:
    """读取文本，跳过空行"""
    with open(path, 'r', encoding='utf-8') as f:
        return [line.rstrip('\n') for line in f if line.strip()]


def run_batch(input_path: str, output_path: str = None, show: int = 5):
    """运行批量分词"""
    print("=" * 60)
    print("分词与词形标注 - 批量处理")
    print("=" * 60)

    print(f"\n📂 加载文本文件: {input_path}")
    texts = load_texts(input_path)
    print(f"   共 {len(texts)} 条文本")

    print(f"\n⚙️ 加载资源 [{settings.rule_lang}]...")
    manager = ResourceManager.from_settings(settings)
    pipeline = TokenizePipeline(manager.get())
    print(f"   {manager.get_stats()}")

    print("\n🚀 开始处理...")
    results = []
    postag_counts = Counter()
    unknown_counts = Counter()

    for i, text in enumerate(texts):
        result = pipeline.analyze(text)
        results.append(result.to_dict())

        for token in result.tokens[1:]:
            postag_counts.update(token.postags)
            if not token.tags:
                unknown_counts[token.lower] += 1

        if (i + 1) % 100 == 0 or i == len(texts) - 1:
            print(f"   进度: {i + 1}/{len(texts)} ({(i + 1) / len(texts) * 100:.1f}%)")

    token_total = sum(len(r['tokens']) - 1 for r in results)
    unknown_total = sum(unknown_counts.values())

    print("\n" + "=" * 60)
    print("统计")
    print("=" * 60)
    print(f"文本数: {len(results)}")
    print(f"Token 数: {token_total}")
    if token_total:
        print(f"未知词: {unknown_total} ({unknown_total / token_total * 100:.1f}%)")

    print("\n📊 词性分布（前 20）:")
    for postag, count in postag_counts.most_common(20):
        print(f"   {postag}: {count}")

    print("\n❓ 高频未知词（前 20）:")
    for word, count in unknown_counts.most_common(20):
        print(f"   {word}: {count}")

    print("\n" + "=" * 60)
    print(f"示例结果（前 {show} 条）")
    print("=" * 60)
    for result in results[:show]:
        print(f"\n{result['text']}")
        parts = [f"{t['text']}({','.join(t['postags'])})" for t in result['tokens'][1:]]
        print("   " + " | ".join(parts))

    if output_path is None:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        output_path = f"tokenize_results_{timestamp}.json"

    with open(output_path, 'w', encoding='utf-8') as f:
        json.dump({
            'summary': {
                'texts': len(results),
                'tokens': token_total,
                'unknown': unknown_total,
                'postag_distribution': dict(postag_counts),
            },
            'results': results
        }, f, ensure_ascii=False, indent=2)

    print(f"\n💾 详细结果已保存到: {output_path}")

    return results


def main():
    """主函数"""
    import argparse

    parser = argparse.ArgumentParser(description='批量分词与词形标注')
    parser.add_argument('input_file', help='文本文件路径（每行一条）')
    parser.add_argument('-o', '--output', help='输出文件路径', default=None)
    parser.add_argument('-n', '--show', type=int, default=5, help='显示的示例条数')

    args = parser.parse_args()

    if not Path(args.input_file).exists():
        print(f"❌ 文件不存在: {args.input_file}")
        sys.exit(1)

    try:
        run_batch(args.input_file, args.output, args.show)
    except ResourceLoadError as e:
        print(f"❌ 资源加载失败: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()

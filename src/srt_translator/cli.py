from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .env import load_dotenv_if_present
from .config import TranslatorConfig
from .errors import InvalidLanguageCode
from .languages import GOOGLE_LANGUAGES
from .pipeline import SrtTranslationPipeline


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="srt-translator",
        description="srt-translator: 使用 Google 翻译逐条翻译 SRT 字幕，时间轴保持不变。",
    )
    parser.add_argument(
        "input",
        type=str,
        nargs="?",
        help="输入 SRT 文件路径。",
    )
    parser.add_argument(
        "target_lang",
        type=str,
        nargs="?",
        help="目标语言代码（如: en, es, fr, ja, zh-CN）。",
    )
    parser.add_argument(
        "output",
        type=str,
        nargs="?",
        default=None,
        help="输出 SRT 文件路径（默认: 在输入文件扩展名前插入语言代码，如 movie.fr.srt）。",
    )
    parser.add_argument(
        "--concurrency",
        type=int,
        default=None,
        help="最大并发请求数（默认不限制，每条字幕一个请求；可通过环境变量 SRT_TRANSLATOR_CONCURRENCY 配置）。",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="单次请求超时时间（秒，默认: 30，可通过环境变量 SRT_TRANSLATOR_TIMEOUT 配置）。",
    )
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="不显示进度条。",
    )
    parser.add_argument(
        "--list-languages",
        action="store_true",
        help="列出支持的语言代码后退出。",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="输出调试日志。",
    )
    return parser


def _print_languages() -> None:
    for code, name in sorted(GOOGLE_LANGUAGES.items()):
        print(f"{code:<10}{name}")


def main(argv: list[str] | None = None) -> int:
    # 确保在解析参数和使用配置之前加载 .env 中的环境变量
    load_dotenv_if_present()
    if argv is None:
        argv = sys.argv[1:]

    parser = build_arg_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as exc:
        # argparse 在参数错误时以 2 退出，这里统一为 1
        return 0 if exc.code in (0, None) else 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    if args.list_languages:
        _print_languages()
        return 0

    if not args.input or not args.target_lang:
        parser.print_usage(sys.stderr)
        print("错误: 需要提供输入文件与目标语言代码", file=sys.stderr)
        return 1

    try:
        config = TranslatorConfig.from_paths(
            input_path=args.input,
            target_lang=args.target_lang,
            output_path=args.output,
            max_workers=args.concurrency,
            timeout=args.timeout,
            show_progress=not args.no_progress,
        )
        print(f"正在将 {Path(args.input)} 翻译为 {args.target_lang} ...")
        result = SrtTranslationPipeline(config).run()
        print(f"翻译完成，用时 {result.elapsed:.2f}s")
        print(f"   输出: {result.output_path}")
        print(f"   条目数: {result.entry_count}")
        if result.failed_count:
            print(f"   失败（保留原文）: {result.failed_count}")
        return 0
    except InvalidLanguageCode as exc:
        print(f"错误: {exc}", file=sys.stderr)
        print("可使用 --list-languages 查看所有支持的语言代码", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\n用户中断")
        return 1
    except Exception as exc:
        print(f"处理失败: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())

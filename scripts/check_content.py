#!/usr/bin/env python3
"""
检查文章目录和站点配置

使用方法:
    uv run python scripts/check_content.py
    uv run python scripts/check_content.py --content-dir content --verbose

发现任何问题时退出码为 1，可直接用于 CI。
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

# 添加项目根目录到路径
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

try:
    from blogstore.content.store import ContentStore, scan_directory
    from blogstore.core.config import get_settings
    from blogstore.core.logger import setup_logging
    from blogstore.core.site import get_site_config
except ImportError as e:
    print("❌ 依赖导入失败，请确保您在项目根目录运行，并且依赖已安装。")
    print(f"   错误信息: {e}")
    sys.exit(1)

logger = logging.getLogger("blogstore.scripts.check_content")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Validate article front matter and slug uniqueness.",
    )
    parser.add_argument(
        "--content-dir",
        type=Path,
        default=None,
        help="Directory holding the markdown articles (defaults to CONTENT_DIR)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    settings = get_settings()
    if args.verbose:
        settings = settings.model_copy(update={"LOG_LEVEL": "DEBUG"})
    setup_logging(settings)

    content_dir = args.content_dir.resolve() if args.content_dir else settings.content_path
    logger.debug("Checking %s", content_dir)
    documents, issues = scan_directory(content_dir)
    store = ContentStore(documents)

    # 有问题时也输出统计，计数只包含通过校验的文章
    print(f"Site: {get_site_config().siteTitle}")
    print(f"Articles: {len(store)}")
    print(f"Tags: {len(store.tags())}")

    if issues:
        print(f"❌ {len(issues)} issue(s) in {content_dir}")
        for issue in issues:
            print(f"   - {issue}")
        return 1

    print("✅ Content OK")
    return 0


if __name__ == "__main__":
    sys.exit(main())

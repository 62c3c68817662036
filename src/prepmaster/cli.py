"""Command-line access to editorial listing, analysis and saved analyses.

Usage:
    prepmaster-cli list [--site mk]
    prepmaster-cli analyze URL [--site mk] [--save] [--json]
    prepmaster-cli saved
    prepmaster-cli delete ID
"""

import argparse
import asyncio
import json
import logging
import sys

from prepmaster.editorial import group_by_date
from prepmaster.editorial.scrapers import get_source
from prepmaster.prep import PREP_LABELS
from prepmaster.prep.classifier import analysis_payload, analyze_prep
from prepmaster.prep.highlight import highlight_paragraphs, render_marked
from prepmaster.prep.narrative import generate_best_practice, truncate
from prepmaster.storage.saved import SavedAnalyses

logger = logging.getLogger(__name__)

_PREVIEW_CHARS = 100


def _cmd_list(args: argparse.Namespace) -> int:
    editorials = get_source(args.site).fetch_list()
    if not editorials:
        print("사설을 찾을 수 없습니다.")
        return 0
    for day, items in group_by_date(editorials).items():
        print(day)
        for item in items:
            print(f"  {item.title}")
            print(f"    {item.link}")
    return 0


async def _save(editorial, analysis) -> str:
    saved = SavedAnalyses.get_instance()
    try:
        if await saved.is_saved(editorial.link):
            return "이미 저장된 사설입니다."
        entry = await saved.save(editorial, analysis)
        return f"저장했습니다: {entry.id}"
    finally:
        await saved.close()


def _cmd_analyze(args: argparse.Namespace) -> int:
    editorial = get_source(args.site).fetch_detail(args.url)
    analysis = analyze_prep(editorial.content, editorial.title)
    best_practice = generate_best_practice(editorial.title, analysis)

    if args.json:
        print(json.dumps(analysis_payload(editorial), ensure_ascii=False, indent=2))
    else:
        print(f"{editorial.title} ({editorial.date})")
        print(editorial.link)
        print()
        for role, item in analysis.items():
            label = PREP_LABELS[role]
            print(f"[{label['letter']}] {label['name']}")
            print(f"  {item.summary}")
            print(f"  원문: {truncate(item.source_text, _PREVIEW_CHARS)}")
            print(f"  예시: {getattr(best_practice, role)}")
        print()
        print(render_marked(highlight_paragraphs(editorial.content, analysis)))

    if args.save:
        print(asyncio.run(_save(editorial, analysis)))
    return 0


async def _list_saved() -> list:
    saved = SavedAnalyses.get_instance()
    try:
        return await saved.all()
    finally:
        await saved.close()


def _cmd_saved(args: argparse.Namespace) -> int:
    items = asyncio.run(_list_saved())
    if not items:
        print("저장된 분석이 없습니다.")
        return 0
    for item in items:
        print(f"{item.id}  {item.editorial.title}  (저장: {item.saved_at[:10]})")
        for role in PREP_LABELS:
            text = getattr(item.prep, role)
            print(f"  [{PREP_LABELS[role]['letter']}] {truncate(text, _PREVIEW_CHARS)}")
    return 0


async def _delete(analysis_id: str) -> bool:
    saved = SavedAnalyses.get_instance()
    try:
        return await saved.delete(analysis_id)
    finally:
        await saved.close()


def _cmd_delete(args: argparse.Namespace) -> int:
    if not asyncio.run(_delete(args.id)):
        print(f"저장된 분석을 찾을 수 없습니다: {args.id}")
        return 1
    print(f"삭제했습니다: {args.id}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="prepmaster-cli")
    sub = parser.add_subparsers(dest="command", required=True)

    p_list = sub.add_parser("list", help="List today's editorials")
    p_list.add_argument("--site", default=None, help="Outlet key (mk, hankyung)")
    p_list.set_defaults(func=_cmd_list)

    p_analyze = sub.add_parser("analyze", help="Fetch an editorial and label PREP sentences")
    p_analyze.add_argument("url")
    p_analyze.add_argument("--site", default=None, help="Outlet key (mk, hankyung)")
    p_analyze.add_argument("--save", action="store_true", help="Save the analysis")
    p_analyze.add_argument("--json", action="store_true", help="Print the API payload")
    p_analyze.set_defaults(func=_cmd_analyze)

    p_saved = sub.add_parser("saved", help="Show saved analyses")
    p_saved.set_defaults(func=_cmd_saved)

    p_delete = sub.add_parser("delete", help="Delete a saved analysis")
    p_delete.add_argument("id")
    p_delete.set_defaults(func=_cmd_delete)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        return args.func(args)
    except Exception as exc:
        logger.exception("Command %s failed", args.command)
        print(f"작업에 실패했습니다: {exc}", file=sys.stderr)
        return 1


def run() -> None:
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.INFO,
    )
    sys.exit(main())


if __name__ == "__main__":
    run()

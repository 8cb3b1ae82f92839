from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from tweetfreq.analysis.segmenter import default_segmenter
from tweetfreq.analysis.service import Analyser
from tweetfreq.config import ConfigError, Settings, load_analysis_config, load_settings, load_symbol_table
from tweetfreq.context import build_context
from tweetfreq.importer.tweets_json import load_tweets
from tweetfreq.normalize.text import opencc_converter
from tweetfreq.stats.frequency import build_dataset, top_words


logging.basicConfig(
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    level=logging.INFO,
)
logger = logging.getLogger(__name__)
logging.getLogger("jieba").setLevel(logging.WARNING)


def create_runtime(settings: Settings) -> Analyser:
    config = load_analysis_config(settings.analysis_config_path)
    symbols = load_symbol_table(settings.symbols_path)
    context = build_context(
        config,
        symbols,
        segmenter=default_segmenter(),
        to_simplified=opencc_converter(settings.opencc_conversion),
    )
    logger.info(
        "runtime ready terms=%s max_term_segments=%s fiat_signs=%s",
        len(config.terms),
        context.terms.max_length,
        len(symbols.fiat_signs),
    )
    return Analyser(context=context)


def run_analyse(analyser: Analyser, text: str, no_filter: bool) -> None:
    result = analyser.analyse(text, no_filter=no_filter)
    print(json.dumps(result.to_dict(), ensure_ascii=False))


def run_freq(analyser: Analyser, json_path: str, out_path: str | None, top: int) -> None:
    tweets, stats = load_tweets(json_path)
    logger.info("import done total=%s imported=%s skipped=%s", stats.total, stats.imported, stats.skipped)
    dataset = build_dataset(tweets, analyser)
    logger.info(
        "dataset built english=%s chinese=%s english_words=%s chinese_words=%s",
        len(dataset.english_tweets),
        len(dataset.chinese_tweets),
        len(dataset.english_freq),
        len(dataset.chinese_freq),
    )
    if out_path:
        Path(out_path).write_text(json.dumps(dataset.to_dict(), ensure_ascii=False, indent=4), encoding="utf-8")
        logger.info("dataset written path=%s", out_path)
        return
    for label, table in (("english", dataset.english_freq), ("chinese", dataset.chinese_freq)):
        print(f"# {label}")
        for word, count in top_words(table, top):
            print(f"{count}\t{word}")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Social media term frequency analysis")
    sub = parser.add_subparsers(dest="command", required=True)
    analyse_parser = sub.add_parser("analyse", help="Analyse a single post")
    analyse_parser.add_argument("text", help="Raw post text")
    analyse_parser.add_argument("--no-filter", action="store_true")
    freq_parser = sub.add_parser("freq", help="Build word frequency tables from a tweets JSON file")
    freq_parser.add_argument("--json", required=True, help="Path to tweets JSON")
    freq_parser.add_argument("--out", help="Write the full dataset JSON here instead of printing")
    freq_parser.add_argument("--top", type=int, default=20)
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    settings = load_settings()
    logging.getLogger().setLevel(settings.log_level)
    try:
        analyser = create_runtime(settings)
    except ConfigError as exc:
        logger.error("startup failed: %s", exc)
        sys.exit(1)
    if args.command == "freq":
        run_freq(analyser, json_path=args.json, out_path=args.out, top=args.top)
        return
    run_analyse(analyser, text=args.text, no_filter=args.no_filter)


if __name__ == "__main__":
    main()

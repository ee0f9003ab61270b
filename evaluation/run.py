"""Main benchmark script - generates JSON results."""

import argparse
import asyncio
import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any

from evaluation.config import EvalConfig
from evaluation.executor import Executor
from evaluation.loader import SAFETY_QUESTIONS, BenchmarkQuestion, load_questions, sample_questions
from evaluation.metrics import score_answer, summarize
from src.config.constants import SourceType
from src.infrastructure.logging.logger import setup_logging

logger = logging.getLogger(__name__)


async def evaluate_question(executor: Executor, item: BenchmarkQuestion) -> dict[str, Any]:
    """Evaluate a single benchmark question."""
    logger.info("[%s] %s", item.id, item.question[:60])

    outcome = await executor.ask(item.question, item.language)
    result: dict[str, Any] = {
        "id": item.id,
        "question": item.question,
        "language": item.language,
        "category": item.category,
        "expected_keywords": item.expected_keywords,
        "expected_sources": item.expected_sources,
        **outcome,
    }
    if outcome.get("error"):
        result.update({"valid": False, "matched_keywords": [], "keyword_match": 0.0, "verified_sources": []})
        return result

    result.update(
        score_answer(
            outcome["answer"],
            outcome["citations"],
            outcome["source_type"],
            item.expected_keywords,
            item.expected_sources,
        )
    )
    return result


async def run_safety_checks(executor: Executor) -> list[dict[str, Any]]:
    """Ask every out-of-domain prompt and record whether it was refused."""
    checks = []
    for question in SAFETY_QUESTIONS:
        outcome = await executor.ask(question, "en")
        rejected = outcome.get("source_type") == SourceType.OFF_TOPIC.value
        logger.info("Safety %s: %s", "PASS" if rejected else "FAIL", question)
        checks.append({"question": question, "rejected": rejected, "response": outcome.get("answer")})
    return checks


async def run_evaluation(config: EvalConfig, sample_size: int | None = None) -> dict[str, Any]:
    """Run the benchmark and return results."""
    questions = load_questions(config.data_path)

    if sample_size:
        questions = sample_questions(questions, n=sample_size)
        logger.info("Sampled %d questions", len(questions))

    results: list[dict[str, Any]] = []
    async with Executor(timeout=config.timeout_per_query) as executor:
        for i, item in enumerate(questions):
            results.append(await evaluate_question(executor, item))
            logger.info("[%d/%d] Done", i + 1, len(questions))

            if i < len(questions) - 1:
                await asyncio.sleep(config.delay_between_queries)

        safety = await run_safety_checks(executor)

    return {
        "metadata": {
            "timestamp": datetime.now().isoformat(),
            "run_id": config.run_id,
            "dataset": config.data_path.name,
        },
        "summary": summarize(results, safety),
        "results": results,
        "safety": safety,
    }


async def main() -> None:
    parser = argparse.ArgumentParser(description="Run the chatbot benchmark")
    parser.add_argument("--sample", type=int, help="Number of questions to sample")
    parser.add_argument("--delay", type=float, default=1.0, help="Delay between questions")
    parser.add_argument("--output", type=str, help="Output JSON path")
    args = parser.parse_args()

    setup_logging(level="INFO", json_output=False)

    config = EvalConfig(delay_between_queries=args.delay)
    output = await run_evaluation(config, sample_size=args.sample)

    output_path = Path(args.output) if args.output else config.output_path
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(output, f, indent=2, ensure_ascii=False, default=str)

    logger.info("Results saved to %s", output_path)


if __name__ == "__main__":
    asyncio.run(main())

import json
import logging
from typing import Any, Dict

import boto3

from settings import AppConfig

logger = logging.getLogger("bookshelf-lambda")

ANTHROPIC_VERSION = "bedrock-2023-05-31"

DEFAULT_REQUEST_OPTIONS = {
    "top_k": 250,
    "top_p": 0.999,
    "stop_sequences": ["\n\nHuman:"],
}


def get_bedrock_client():
    return boto3.client(
        "bedrock-runtime",
        region_name=AppConfig.get_value("aws_region"),
    )


class BookSummaryService:
    """Generates short book summaries with an Anthropic Claude model on Amazon Bedrock."""

    def __init__(self, client=None, model_id: str = None):
        self.client = client or get_bedrock_client()
        self.model_id = model_id or AppConfig.get_value("bedrock_model_id")

    def generate_summary(self, book_info: Dict[str, Any]) -> str:
        """
        Summarize a book from its catalog fields.

        Args:
            book_info (dict): title, author, publisher and optional genre

        Returns:
            str: Generated summary, or "" if generation failed
        """
        try:
            prompt = self.create_summary_prompt(book_info)
            return self.generate_text(prompt)
        except Exception as e:
            logger.error(f"Error generating book summary: {str(e)}")
            return ""

    @staticmethod
    def create_summary_prompt(book_info: Dict[str, Any]) -> str:
        genre = book_info.get("genre")
        lines = [
            "次の書籍の概要と特徴を3〜5文で簡潔にまとめてください。専門的で客観的な文体を使用してください。",
            "",
            f"タイトル: {book_info['title']}",
            f"著者: {book_info['author']}",
            f"出版社: {book_info['publisher']}",
        ]
        if genre:
            lines.append(f"ジャンル: {genre}")
        return "\n".join(lines)

    def generate_text(self, prompt: str, **options) -> str:
        """
        Send a single-turn prompt to the model and return its text.
        Keyword options override the default sampling parameters.
        """
        request_options = {
            "max_tokens": int(AppConfig.get_value("summary_max_tokens")),
            "temperature": float(AppConfig.get_value("summary_temperature")),
            **DEFAULT_REQUEST_OPTIONS,
            **options,
        }
        payload = {
            "anthropic_version": ANTHROPIC_VERSION,
            **request_options,
            "messages": [{"role": "user", "content": prompt}],
        }
        try:
            response = self.client.invoke_model(
                modelId=self.model_id,
                body=json.dumps(payload),
            )
            response_body = json.loads(response["body"].read())
        except Exception as e:
            logger.error(f"Error invoking {self.model_id}: {str(e)}")
            raise
        return self.parse_response(response_body)

    @staticmethod
    def parse_response(response_body: Dict[str, Any]) -> str:
        """Extract the text from a messages or legacy completion response"""
        content = response_body.get("content")
        if isinstance(content, list):
            return " ".join(
                item.get("text", "") for item in content if item.get("type") == "text"
            ).strip()

        if response_body.get("completion"):
            return response_body["completion"].strip()

        return ""

#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
SearchServer - command-line interface
Loads documents from a JSON file and runs queries against them.
"""

import argparse
import json
import logging
import sys
from typing import List

from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from SearchServer.config import load_config
from SearchServer.errors import SearchServerError, InvalidArgumentError
from SearchServer.log_duration import LogDuration
from SearchServer.paginator import paginate
from SearchServer.preprocessing.document import Document, DocumentStatus
from SearchServer.remove_duplicates import remove_duplicates
from SearchServer.request_queue import RequestQueue
from SearchServer.tfidf_search.search_server import SearchServer

console = Console()
error_console = Console(stderr=True)

logger = logging.getLogger("SearchServer")


def setup_logging(level: str = "INFO", show_time: bool = False):
    """Route all log records through rich."""
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=error_console, show_time=show_time, show_path=False)],
        force=True,
    )


def parse_status(name: str) -> DocumentStatus:
    if not isinstance(name, str):
        raise InvalidArgumentError(f"Document status must be a string, got {name!r}")
    try:
        return DocumentStatus[name.upper()]
    except KeyError:
        raise InvalidArgumentError(f"Unknown document status {name!r}") from None


class SearchServerCLI:
    def __init__(self, stop_words: str = "", page_size: int = 5):
        """Initialize the CLI interface"""
        if page_size < 1:
            raise InvalidArgumentError(f"Page size must be positive, got {page_size}")
        self.search_server = SearchServer(stop_words)
        self.request_queue = RequestQueue(self.search_server)
        self.page_size = page_size

    def print_header(self):
        """Display the application header"""
        console.print(Panel(
            "[bold blue]SearchServer[/bold blue] [yellow]TF-IDF Search[/yellow]",
            border_style="blue",
            width=80
        ))

    def load_documents(self, documents_path: str) -> int:
        """
        Load documents from a JSON file into the server.

        The file holds a list of objects with "text" and optional "id",
        "status" and "ratings" fields. Documents without an id are numbered
        by their position in the list.

        Returns:
            Number of documents added
        """
        console.print(f"Loading documents from: [cyan]{documents_path}[/cyan]")
        with open(documents_path, "r", encoding="utf-8") as f:
            documents = json.load(f)

        if not isinstance(documents, list):
            raise InvalidArgumentError("Documents file must contain a JSON list")

        with LogDuration("Indexing", logger):
            for position, doc in enumerate(documents):
                if not isinstance(doc, dict):
                    raise InvalidArgumentError(f"Document #{position} is not a JSON object")
                try:
                    document_id = int(doc.get("id", position))
                except (TypeError, ValueError):
                    raise InvalidArgumentError(f"Document #{position} has a non-integer id") from None
                text = doc.get("text", "")
                if not isinstance(text, str):
                    raise InvalidArgumentError(f"Document #{position} has a non-string text")
                ratings = doc.get("ratings", [])
                if not isinstance(ratings, list) or not all(
                        isinstance(rating, int) and not isinstance(rating, bool) for rating in ratings):
                    raise InvalidArgumentError(f"Document #{position} ratings must be a list of integers")
                self.search_server.add_document(
                    document_id,
                    text,
                    parse_status(doc.get("status", DocumentStatus.ACTUAL.name)),
                    ratings,
                )

        console.print(f"[green]Successfully loaded [bold]{len(documents)}[/bold] documents[/green]")
        return len(documents)

    def search(self, query: str, status: DocumentStatus = DocumentStatus.ACTUAL) -> List[Document]:
        with LogDuration(f"Query {query!r}", logger, logging.DEBUG):
            return self.request_queue.add_find_request(query, status)

    def display_results(self, query: str, results: List[Document]):
        """Display search results page by page"""
        console.rule(f"[bold yellow]{escape(query)}[/bold yellow]", style="yellow")
        if not results:
            console.print("[yellow]No results found.[/yellow]")
            return

        for page_number, page in enumerate(paginate(results, self.page_size), 1):
            table = Table(
                box=box.HEAVY_EDGE,
                show_header=True,
                header_style="bold magenta",
                title=f"[bold]Page {page_number}[/bold]",
                title_style="yellow"
            )
            table.add_column("Document", style="cyan bold")
            table.add_column("Relevance", style="yellow")
            table.add_column("Rating", style="green")

            for doc in page:
                table.add_row(str(doc.id), f"{doc.relevance:.6f}", str(doc.rating))

            console.print(table)

    def display_match(self, query: str, document_id: int):
        words, status = self.search_server.match_document(query, document_id)
        matched = escape(" ".join(words)) if words else "[dim]<none>[/dim]"
        console.print(f"Document [cyan]{document_id}[/cyan] ({status.name}) matches {escape(repr(query))}: {matched}")

    def display_frequencies(self, document_id: int):
        frequencies = self.search_server.get_word_frequencies(document_id)
        table = Table(box=box.ROUNDED, show_header=True, header_style="bold magenta",
                      title=f"[bold]Word frequencies of document {document_id}[/bold]")
        table.add_column("Word", style="cyan")
        table.add_column("Frequency", style="yellow", justify="right")
        for word, freq in sorted(frequencies.items()):
            table.add_row(word, f"{freq:.6f}")
        console.print(table)


def main(argv=None):
    """Main entry point for the CLI application"""
    parser = argparse.ArgumentParser(description='SearchServer - TF-IDF full-text search')
    parser.add_argument('--documents', help='Path to documents JSON file')
    parser.add_argument('--stop-words', help='Space separated stop words (overrides config)')
    parser.add_argument('--config', help='Path to config JSON file')
    parser.add_argument('--query', action='append', default=[],
                        help='Query to run, may be given several times')
    parser.add_argument('--status', choices=[s.name for s in DocumentStatus],
                        default=DocumentStatus.ACTUAL.name,
                        help='Only return documents with this status')
    parser.add_argument('--match', type=int, metavar='ID',
                        help='Show which words of every query document ID matches')
    parser.add_argument('--frequencies', type=int, metavar='ID',
                        help='Show word frequencies of document ID')
    parser.add_argument('--remove-duplicates', action='store_true',
                        help='Remove documents with the same set of words')
    parser.add_argument('--page-size', type=int, help='Results per displayed page')
    parser.add_argument('--debug', action='store_true', help='Enable debug logging')
    args = parser.parse_args(argv)

    config = load_config(args.config)
    log_config = config.get("logging", {})
    setup_logging("DEBUG" if args.debug else log_config.get("level", "INFO"),
                  log_config.get("show_time", False))

    stop_words = args.stop_words if args.stop_words is not None else config.get("stop_words", "")
    page_size = args.page_size if args.page_size is not None else config.get("page_size", 5)

    try:
        cli = SearchServerCLI(stop_words, page_size)
        cli.print_header()

        if args.documents:
            cli.load_documents(args.documents)

        if args.remove_duplicates:
            removed = remove_duplicates(cli.search_server)
            console.print(f"Removed [bold]{len(removed)}[/bold] duplicate document(s)")

        status = DocumentStatus[args.status]
        for query in args.query:
            cli.display_results(query, cli.search(query, status))
            if args.match is not None:
                cli.display_match(query, args.match)

        if args.frequencies is not None:
            cli.display_frequencies(args.frequencies)

        if args.query:
            console.print(f"Requests without results: [bold]{cli.request_queue.get_no_result_requests()}[/bold]")

    except (SearchServerError, OSError, json.JSONDecodeError) as e:
        error_console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        sys.exit(1)


if __name__ == "__main__":
    main()

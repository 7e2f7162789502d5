"""CLI entry point for contextpack."""

import argparse
import json
import logging
import sys
from typing import Optional

from contextpack.config import get_settings
from contextpack.errors import IngestError
from contextpack.index import DocumentIndex

logger = logging.getLogger(__name__)


def load_index(source: str, chunk_size: int) -> DocumentIndex:
    """Ingest a source or exit with status 1."""
    index = DocumentIndex(chunk_size=chunk_size)
    try:
        index.load(source)
    except IngestError as e:
        logger.error(str(e))
        logger.error("Supported inputs: folders, .zip files")
        sys.exit(1)
    return index


def info(source: str, chunk_size: int) -> None:
    """Show what a corpus source indexes into.

    Args:
        source: Path to folder or zip file
        chunk_size: Maximum chunk length in characters
    """
    index = load_index(source, chunk_size)
    stats = index.stats()

    print(f"Source: {source}")
    print(f"  Chunk size: {chunk_size}")
    print("")
    print("Contents:")
    print(f"  Documents: {stats['documents']}")
    print(f"  Chunks: {stats['chunks']}")
    print(f"  Keywords: {stats['keywords']}")
    print("")
    for document in index.documents:
        print(f"  {document.path:<50} {document.title}")


def search(source: str, query: str, limit: int, chunk_size: int, as_json: bool = False) -> None:
    """Run one query against a corpus source and print the ranked chunks."""
    index = load_index(source, chunk_size)
    results = index.search(query, limit)

    if as_json:
        payload = [
            {
                "id": c.id,
                "doc_path": c.doc_path,
                "title": c.title,
                "score": c.score,
                "text": c.text,
            }
            for c in results
        ]
        print(json.dumps(payload, indent=2))
        return

    if not results:
        print(f"No results found for: {query}")
        return

    for i, chunk in enumerate(results, 1):
        text = chunk.text[:200].replace("\n", " ")
        if len(chunk.text) > 200:
            text += "..."
        print(f"{i}. [{chunk.score:.3f}] {chunk.title} ({chunk.doc_path})")
        print(f"   {text}")
        print("")


def serve(source: str, chunk_size: int, max_results: int) -> None:
    """Load a corpus and serve it over MCP (stdio)."""
    index = load_index(source, chunk_size)

    # Import here to avoid loading MCP unless needed
    from contextpack.server import create_mcp_server

    logger.info(f"Serving {source} via stdio")
    mcp = create_mcp_server(index, max_results=max_results)
    mcp.run(transport="stdio")


def main(argv: Optional[list[str]] = None) -> None:
    """Main CLI entry point."""
    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(message)s",
    )

    parser = argparse.ArgumentParser(
        prog="contextpack",
        description="contextpack - lexical retrieval over a documentation corpus",
    )
    parser.add_argument(
        "--chunk-size",
        type=int,
        default=settings.chunk_size,
        help=f"Maximum chunk length in characters (default: {settings.chunk_size})",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # info command
    info_parser = subparsers.add_parser(
        "info",
        help="Show documents and chunk counts for a corpus",
    )
    info_parser.add_argument(
        "source",
        nargs="?",
        default=str(settings.docs_zip_path),
        help="Input folder or zip file path (default: DOCS_ZIP_PATH)",
    )

    # search command
    search_parser = subparsers.add_parser(
        "search",
        help="Rank chunks of a corpus against a query",
    )
    search_parser.add_argument("source", help="Input folder or zip file path")
    search_parser.add_argument("query", help="Free-text query")
    search_parser.add_argument(
        "-k",
        "--limit",
        type=int,
        default=settings.max_context_chunks,
        help=f"Maximum results (default: {settings.max_context_chunks})",
    )
    search_parser.add_argument("--json", action="store_true", help="Print results as JSON")

    # serve command
    serve_parser = subparsers.add_parser(
        "serve",
        help="Start an MCP server over a corpus",
    )
    serve_parser.add_argument(
        "source",
        nargs="?",
        default=str(settings.docs_zip_path),
        help="Input folder or zip file path (default: DOCS_ZIP_PATH)",
    )

    args = parser.parse_args(argv)
    if args.chunk_size <= 0:
        parser.error("--chunk-size must be positive")

    if args.command == "info":
        info(args.source, args.chunk_size)
    elif args.command == "search":
        if args.limit < 0:
            parser.error("--limit must be >= 0")
        search(args.source, args.query, args.limit, args.chunk_size, as_json=args.json)
    elif args.command == "serve":
        serve(args.source, args.chunk_size, settings.max_context_chunks)


if __name__ == "__main__":
    main()

"""FastMCP server exposing a loaded DocumentIndex."""

from mcp.server.fastmcp import FastMCP

from contextpack.index import DocumentIndex


def format_size(size: int) -> str:
    if size < 1024:
        return f"{size} B"
    if size < 1024 * 1024:
        return f"{size / 1024:.1f} KB"
    return f"{size / (1024 * 1024):.1f} MB"


def create_mcp_server(index: DocumentIndex, max_results: int = 5) -> FastMCP:
    """Create an MCP server answering from an already-ingested index.

    Args:
        index: The index to serve; later re-ingests are picked up by the tools
        max_results: Default number of chunks returned by ``search``

    Returns:
        Configured FastMCP server instance
    """
    mcp = FastMCP(
        name="contextpack",
    )

    @mcp.tool()
    def ls(path: str = "") -> str:
        """List documents in the index.

        Args:
            path: Optional path prefix to filter results (e.g., "guides/")

        Returns:
            One line per document with its title and size
        """
        documents = [d for d in index.documents if d.path.startswith(path)]
        if not documents:
            return f"No documents found matching '{path}'"

        return "\n".join(
            f"{d.path:<60} {format_size(d.metadata.size_bytes):>10}  {d.title}"
            for d in documents
        )

    @mcp.tool()
    def read(path: str) -> str:
        """Read a document's full text.

        Args:
            path: Document path (as shown in ls output)
        """
        for document in index.documents:
            if document.path == path:
                return document.content
        return f"Error: Document not found: {path}"

    @mcp.tool()
    def search(query: str, limit: int = max_results) -> str:
        """Keyword search across the indexed documentation.

        Matches query words (4+ letters, common words ignored) against the
        indexed chunks; rarer words weigh more.

        Args:
            query: Free-text question or keywords
            limit: Maximum number of chunks to return

        Returns:
            Ranked chunks with scores
        """
        results = index.search(query, max(limit, 0))
        if not results:
            return f"No results found for: {query}"

        lines = []
        for i, chunk in enumerate(results, 1):
            lines.append(f"{i}. [{chunk.score:.3f}] {chunk.title} ({chunk.doc_path})")
            lines.append(chunk.text.strip())
            lines.append("")
        return "\n".join(lines)

    return mcp

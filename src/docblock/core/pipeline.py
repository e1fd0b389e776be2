"""File pipeline: discover markdown files, compile them, write JSON"""

from pathlib import Path

import structlog

from docblock.core.compiler import Compiler
from docblock.core.models import Block, CompiledDoc
from docblock.core.routes import assign_routes
from docblock.core.utils.slug import slugify


logger = structlog.get_logger(__name__)

MD_EXTENSIONS = {'.md', '.mdx'}


def discover_files(path: Path) -> list[Path]:
    """Return sorted .md/.mdx files under path, or [path] if a single file."""
    if path.is_file():
        return [path] if path.suffix in MD_EXTENSIONS else []
    return sorted(p for p in path.rglob('*') if p.suffix in MD_EXTENSIONS)


def compile_file(path: Path, compiler: Compiler) -> CompiledDoc:
    """Compile one file; heading routes are assigned over the whole file."""
    block = compiler.render_block(path.read_text(encoding='utf-8'))
    block = Block(
        contents=tuple(assign_routes(block.contents)),
        contents_raw=block.contents_raw,
        metadata=block.metadata,
    )
    slug = str(block.metadata.get('slug') or slugify(path.stem, fallback="doc"))
    return CompiledDoc(slug=slug, path=str(path), block=block)


def run_compile(path: str, compiler: Compiler, output_dir: Path) -> list[tuple[Path, Path]]:
    """Compile path and write one <slug>.json per document. Returns (source, output) pairs."""
    output_dir.mkdir(parents=True, exist_ok=True)
    results = []
    written: dict[str, Path] = {}     # slug -> source that produced it
    for p in discover_files(Path(path)):
        try:
            doc = compile_file(p, compiler)
        except Exception as e:
            raise RuntimeError(f"Failed to compile {p}: {e}") from e
        out_file = output_dir / f"{doc.slug}.json"
        if doc.slug in written:
            logger.warning("slug_collision", slug=doc.slug, source=str(p), overwrites=str(written[doc.slug]))
        written[doc.slug] = p
        out_file.write_text(doc.model_dump_json(indent=2), encoding='utf-8')
        logger.info("block_compiled", source=str(p), output=str(out_file), tags=len(doc.block.tags))
        results.append((p, out_file))
    return results

import copy
from pathlib import Path
from functools import lru_cache

import yaml
from rich.console import Console
from rich.table import Table

c = Console()

# Config names whose summary table has already been shown
_tables_shown = set()


@lru_cache(maxsize=4)
def _read_segmenter_config(name: str) -> dict:
	"""Read and parse a config file once per name."""
	p = Path(__file__).parent / "config" / name

	c.rule(f"[bold cyan]Loading Segmenter Config")
	c.print(f"[green]✔ Found:[/] [cyan]{p}[/cyan], loading...")

	if not p.exists():
		c.print(f"[red]❌ Missing config file:[/] {p}")
		raise FileNotFoundError(f"Missing segmenter config: {p}")

	with p.open("r", encoding="utf-8") as f:
		cfg = yaml.safe_load(f) or {}

	c.print(f"[green]✔ Successfully parsed:[/] [white]{name}[/white]")
	return cfg


def _print_config_table(cfg: dict) -> None:
	lex = cfg.get("lexicon") or {}
	hmm = cfg.get("hmm") or {}
	tbl = Table(show_header=True, header_style="bold magenta")
	tbl.add_column("Field", style="dim")
	tbl.add_column("Value")

	tbl.add_row("Dictionary", str(lex.get("dictionary") or "—"))
	tbl.add_row("User Dictionaries", str(len(lex.get("user_dictionaries") or [])))
	tbl.add_row("Load Batch Size", str(lex.get("load_batch_size", "—")))
	tbl.add_row("HMM Model", str(hmm.get("model") or "—"))
	tbl.add_row("Force Split Words", str(len(hmm.get("force_split") or [])))

	c.print(tbl)


def load_segmenter_config(name: str = "hanseg.yaml", quiet: bool = False) -> dict:
	"""
	Load the segmenter configuration file and render a summary table.
	The file is parsed once per name; every caller gets its own copy.

	Args:
		name: The name of the config file under hanseg/config/.
		quiet: If True, suppresses printing the config table.
	"""
	cfg = _read_segmenter_config(name)

	if not quiet and name not in _tables_shown:
		_print_config_table(cfg)
		_tables_shown.add(name)

	return copy.deepcopy(cfg)

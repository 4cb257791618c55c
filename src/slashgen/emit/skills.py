"""Skill compiler: skill.json + skill.md directories -> host slash-command manifests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

from slashgen.core.utils import read_text_exact
from slashgen.registry import SKILL_REGISTRIES, CommandEntry, Registry

from .events import EmitError, EmitListener, RunReport
from .pipeline import Loaded, Skip, Source, emit

if TYPE_CHECKING:
    from slashgen.core.config import Config

SKILL_META = "skill.json"
SKILL_BODY = "skill.md"

GEMINI_FEATURES = """
## Gemini CLI Specific Features

**1. Inline Arguments Support:**
If user provides arguments inline, parse them:
  Example: /skills:automation:code-reviewer {{args}}
  If args = "security lib/features/auth":
    - review_type = "security"
    - target_path = "lib/features/auth"

**2. 1M Token Context Utilization:**
You have access to Gemini's 1M token context window:
- Load entire codebase for comprehensive analysis
- Process massive PRDs (up to 400 pages of requirements)
- Analyze all 32 PRPROMPTS files simultaneously
- Cross-reference patterns across the entire project
- No need to ask "should I read more files?" - just load everything

**3. Free Tier Optimization:**
Gemini offers industry-leading free tier:
- 60 requests/minute
- 1,000 requests/day
- No credit card required

Optimize usage by:
- Batching related operations in single requests
- Using full 1M context to avoid multiple round-trips
- Caching analysis results for reuse

**4. ReAct Loop Integration:**
Leverage Gemini's ReAct (Reason and Act) agent mode:
- Break complex tasks into reasoning steps
- Execute actions based on reasoning
- Iterate until task completion
- Especially useful for multi-file operations

"""

_PROMPT_STRATEGY = (
    "**Interactive Prompt Strategy:**\n"
    "Ask user for input ONLY if:\n"
    "1. Required input has no default value\n"
    "2. User explicitly wants to override a default\n\n"
    "For each input, prompt with format:\n"
    '  "input_name? (press Enter for default_value)": \n\n'
)


def _as_json(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def _as_text(value: Any) -> str:
    return value if isinstance(value, str) else _as_json(value)


def _input_line(key: str, info: dict, quote_default: bool) -> str:
    line = f"- {key}: {info.get('description', '')}"
    if "default" in info:
        default = info["default"]
        if quote_default:
            line += f' (default: "{_as_text(default)}")'
        else:
            line += f" (default: {_as_json(default)})"
    if info.get("enum"):
        line += f" [options: {', '.join(_as_text(v) for v in info['enum'])}]"
    return line + "\n"


def smart_defaults_section(meta: dict) -> str:
    """Markdown section describing a skill's inputs; empty without ``inputs``."""
    inputs = meta.get("inputs")
    if inputs is None:
        return ""
    required = inputs.get("required") or {}
    optional = inputs.get("optional") or {}

    section = "\n## Smart Defaults (from skill.json)\n\n"
    if required:
        section += "**Required Inputs:**\n"
        for key, info in required.items():
            section += _input_line(key, info, quote_default=True)
        section += "\n"
    if optional:
        section += "**Optional Inputs (use defaults if not specified):**\n"
        for key, info in optional.items():
            section += _input_line(key, info, quote_default=False)
        section += "\n"
    return section + _PROMPT_STRATEGY


def build_skill_prompt(meta: dict, body: str, host: str) -> str:
    prefix = smart_defaults_section(meta)
    if host == "gemini":
        prefix += GEMINI_FEATURES
    return f"{prefix}\n{body}"


def load_skill(skills_dir: Path, entry: CommandEntry) -> tuple[dict, str] | str:
    """Return ``(meta, body)`` for a skill directory, or a skip reason."""
    skill_dir = skills_dir / entry.category / entry.command_id
    meta_path = skill_dir / SKILL_META
    body_path = skill_dir / SKILL_BODY
    if not meta_path.is_file() or not body_path.is_file():
        return "missing files"
    try:
        raw_meta = read_text_exact(meta_path)
        body = read_text_exact(body_path)
    except OSError as e:
        raise EmitError("read", Path(e.filename or skill_dir), e) from e
    try:
        meta = json.loads(raw_meta)
    except json.JSONDecodeError as e:
        return f"invalid {SKILL_META}: {e}"
    if not isinstance(meta, dict):
        return f"invalid {SKILL_META}: expected an object"
    return meta, body


def skill_source(skills_dir: Path, host: str) -> Source:
    def _load(entry: CommandEntry) -> Loaded | Skip:
        result = load_skill(skills_dir, entry)
        if isinstance(result, str):
            return Skip(result)
        meta, body = result
        description = meta.get("description")
        return Loaded(
            prompt=build_skill_prompt(meta, body, host),
            description=description if isinstance(description, str) else None,
        )

    return _load


def emit_skills(
    config: Config,
    registry: Registry | None = None,
    listener: EmitListener | None = None,
) -> RunReport:
    """Build skill manifests for ``config.host`` under ``config.skills_output_dir``."""
    if registry is None:
        registry = SKILL_REGISTRIES[config.host]
    source = skill_source(config.skills_source_dir, config.host)
    return emit(registry, source, config.skills_output_dir, listener)

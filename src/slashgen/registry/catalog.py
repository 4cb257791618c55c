"""Built-in catalogues: PRPROMPTS commands and per-host skill sets."""

from __future__ import annotations

from .models import Registry

COMMANDS = {
    "prd": [
        "create",
        "auto-generate",
        "from-files",
        "auto-from-project",
        "analyze",
        "refine",
    ],
    "planning": [
        "estimate-cost",
        "analyze-dependencies",
        "stakeholder-review",
        "implementation-plan",
    ],
    "prprompts": [
        "generate-all",
        "phase-1",
        "phase-2",
        "phase-3",
        "single-file",
    ],
    "automation": [
        "bootstrap",
        "implement-next",
        "update-plan",
        "full-cycle",
        "review-commit",
        "qa-check",
    ],
}

DESCRIPTIONS = {
    # PRD
    "prd/create": "Interactive PRD wizard with template selection",
    "prd/auto-generate": "Auto-generate PRD from description file",
    "prd/from-files": "Generate PRD from existing markdown docs",
    "prd/auto-from-project": "Auto-discover and consolidate all project markdown files into PRD",
    "prd/analyze": "Validate PRD with quality scoring (A-F grades) and AI confidence levels",
    "prd/refine": "Interactive PRD quality improvement loop",
    # Planning
    "planning/estimate-cost": (
        "Generate comprehensive cost breakdown (labor, infrastructure, compliance)"
    ),
    "planning/analyze-dependencies": "Map feature dependencies and calculate critical path",
    "planning/stakeholder-review": "Create role-specific PRD review checklists",
    "planning/implementation-plan": (
        "Generate intelligent implementation plan with sprint planning"
    ),
    # PRPROMPTS generation
    "prprompts/generate-all": "Generate all 32 PRPROMPTS files from PRD",
    "prprompts/phase-1": "Generate Phase 1: Core Architecture (10 files)",
    "prprompts/phase-2": "Generate Phase 2: Quality & Security (12 files)",
    "prprompts/phase-3": "Generate Phase 3: Demo & Learning (10 files)",
    "prprompts/single-file": "Generate single PRPROMPTS file by name",
    # Automation
    "automation/bootstrap": "Complete Flutter project setup with Clean Architecture (2 min)",
    "automation/implement-next": (
        "Auto-implement next feature from IMPLEMENTATION_PLAN.md (10 min)"
    ),
    "automation/update-plan": "Re-plan based on actual velocity and progress (30 sec)",
    "automation/full-cycle": (
        "Auto-implement 1-10 features with dependency management (1-2 hours)"
    ),
    "automation/review-commit": "Validate code against PRPROMPTS patterns and commit",
    "automation/qa-check": "Comprehensive compliance audit (architecture, security, testing)",
}

_AUTOMATION_SKILLS = [
    "flutter-bootstrapper",
    "feature-implementer",
    "automation-orchestrator",
    "code-reviewer",
    "qa-auditor",
]

# Skill descriptions come from each skill.json, so these registries carry no table.
SKILLS = {
    "gemini": {
        "automation": _AUTOMATION_SKILLS,
        "prprompts-core": ["phase-generator", "single-file-generator"],
        "development-workflow": ["flutter-flavors"],
    },
    "qwen": {
        "automation": _AUTOMATION_SKILLS,
        "prprompts-core": [
            "prd-creator",
            "prprompts-generator",
            "phase-generator",
            "single-file-generator",
        ],
        "development-workflow": ["flutter-flavors"],
    },
}

SKILL_FALLBACK = "Execute {name} skill"

DEFAULT_COMMANDS = Registry(categories=COMMANDS, descriptions=DESCRIPTIONS)

SKILL_REGISTRIES = {
    host: Registry(categories=skills, fallback=SKILL_FALLBACK) for host, skills in SKILLS.items()
}

import shutil
from datetime import date
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

import livehouse.config as cfg_module
from livehouse import content
from livehouse.presentation import FILTERS

PACKAGE_DIR = Path(__file__).resolve().parent.parent
TEMPLATES_DIR = PACKAGE_DIR / "templates"
STATIC_DIR = PACKAGE_DIR / "static"


def make_env(cfg: dict) -> Environment:
    site_cfg = cfg_module.get_site(cfg)

    env = Environment(
        loader=FileSystemLoader(TEMPLATES_DIR),
        autoescape=select_autoescape(["html"]),
    )
    env.filters.update(FILTERS)
    env.globals["base_url"] = site_cfg.get("base_url", "").rstrip("/")
    env.globals["site_title"] = site_cfg.get("title", content.VENUE["full_name"])
    env.globals["venue"] = content.VENUE
    return env


def render_index(env: Environment, today: date | None = None) -> str:
    """Render the single page shell; the schedule and next show are fetched by the browser."""
    today = today or date.today()
    template = env.get_template("index.html")
    return template.render(
        nav_items=content.NAV_ITEMS,
        about_intro=content.ABOUT_INTRO,
        about_features=content.ABOUT_FEATURES,
        hero_image=content.HERO_IMAGE,
        equipment=content.EQUIPMENT,
        year=today.year,
    )


def build_site(cfg: dict, output_dir: Path) -> Path:
    """Write index.html and the static assets for production serving."""
    output_dir.mkdir(parents=True, exist_ok=True)

    static_dst = output_dir / "static"
    if static_dst.exists():
        shutil.rmtree(static_dst)
    shutil.copytree(STATIC_DIR, static_dst)

    env = make_env(cfg)
    index = output_dir / "index.html"
    index.write_text(render_index(env), encoding="utf-8")
    return index

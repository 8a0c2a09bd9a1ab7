import argparse
import datetime
import logging
import sys
from dataclasses import replace
from pathlib import Path

from dateutil import parser as dateparser

from livehouse import __version__
import livehouse.config as cfg_module
from livehouse.client import ClientError, LivehouseClient
from livehouse.generator.build import build_site
from livehouse.models import Event
from livehouse.presentation import door_price, format_currency, long_date


def _parse_date(raw: str) -> str:
    """Accept '2026-10-20', 'Oct 20 2026', '20/10/2026' ...; return ISO."""
    try:
        return datetime.date.fromisoformat(raw).isoformat()
    except ValueError:
        pass
    # day-first only applies to non-ISO forms such as 20/10/2026
    try:
        return dateparser.parse(raw, dayfirst=True).date().isoformat()
    except (ValueError, OverflowError):
        print(f"Error: could not parse date '{raw}'.", file=sys.stderr)
        sys.exit(1)


def _serve(args, cfg):
    import uvicorn

    from livehouse.server import create_app

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    port = args.port or cfg_module.get_port(cfg)
    try:
        app = create_app(cfg)
    except FileNotFoundError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)
    print(f"Server running on http://localhost:{port}")
    uvicorn.run(app, host=args.host, port=port)


def _build(args, cfg):
    output_dir = cfg_module.get_dist_dir(cfg)
    build_site(cfg, output_dir)
    print(f"Site built in '{output_dir}/'.")


def _init_db(args, cfg):
    from livehouse.server import init_store

    db_path = cfg_module.get_database_path(cfg)
    seeded = init_store(db_path)
    print(f"Database ready at '{db_path}'.")
    if seeded:
        print(f"Seeded {seeded} demo events.")


# --- events ---

def _client(args, cfg, login: bool = True) -> LivehouseClient:
    url = args.url or f"http://localhost:{cfg_module.get_port(cfg)}"
    client = LivehouseClient(url)
    if login:
        client.login(args.password or cfg_module.get_admin_password(cfg))
    return client


def _event_from_args(args, base: Event) -> Event:
    updates = {}
    if args.date is not None:
        updates["date"] = _parse_date(args.date)
    for attr in ("title", "artists", "description", "open_time", "start_time", "image_url"):
        value = getattr(args, attr)
        if value is not None:
            updates[attr] = value
    for attr in ("ticket_price", "door_price"):
        value = getattr(args, attr)
        if value is not None:
            updates[attr] = format_currency(value)
    return replace(base, **updates)


def _events_list(args, cfg):
    events = _client(args, cfg, login=False).list_events()
    if not events:
        print("No events scheduled yet.")
        return
    for e in events:
        print(f"{e.id:>4}  {long_date(e.date)}  {e.title}")
        if e.artists:
            print(f"      {e.artists}")
        print(f"      Open {e.open_time} / Start {e.start_time}   Adv. {e.ticket_price} / Door {door_price(e)}")


def _events_add(args, cfg):
    client = _client(args, cfg)
    event = _event_from_args(args, Event(date="", title="", open_time="18:00", start_time="19:00"))
    event_id = client.create_event(event)
    print(f"Created event {event_id}.")


def _events_edit(args, cfg):
    client = _client(args, cfg)
    current = next((e for e in client.list_events() if e.id == args.id), None)
    if current is None:
        print(f"Error: no event with id {args.id}.", file=sys.stderr)
        sys.exit(1)
    client.update_event(args.id, _event_from_args(args, current))
    print(f"Updated event {args.id}.")


def _events_remove(args, cfg):
    _client(args, cfg).delete_event(args.id)
    print(f"Deleted event {args.id}.")


def _events_upload(args, cfg):
    print(_client(args, cfg).upload_image(Path(args.file)))


def _add_event_fields(parser, require: bool):
    parser.add_argument("--date", required=require, help="Event date (any common format)")
    parser.add_argument("--title", required=require)
    parser.add_argument("--artists")
    parser.add_argument("--description")
    parser.add_argument("--open", dest="open_time", metavar="HH:MM")
    parser.add_argument("--start", dest="start_time", metavar="HH:MM")
    parser.add_argument("--price", dest="ticket_price", help="Advance price, e.g. 2000")
    parser.add_argument("--door", dest="door_price", help="Door price; defaults to advance + 500")
    parser.add_argument("--image", dest="image_url", metavar="URL")


def main():
    parser = argparse.ArgumentParser(
        prog="livehouse",
        description="Live music venue website and event admin",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--config", default="config.toml", metavar="PATH",
        help="Path to config.toml (default: config.toml)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # serve
    sp_serve = subparsers.add_parser("serve", help="Run the web server")
    sp_serve.add_argument("--host", default="0.0.0.0")
    sp_serve.add_argument("--port", type=int, help="Port (default: $PORT or 3000)")

    # build
    subparsers.add_parser("build", help="Render the page and static assets for production")

    # init-db
    subparsers.add_parser("init-db", help="Create/migrate the database and seed demo events")

    # events
    sp_events = subparsers.add_parser("events", help="Manage events on a running server")
    sp_events.add_argument("--url", help="Server URL (default: http://localhost:<port>)")
    sp_events.add_argument("--password", help="Admin password (default: from config)")
    ev_sub = sp_events.add_subparsers(dest="events_command", required=True)

    ev_sub.add_parser("list", help="List all events")

    sp_add = ev_sub.add_parser("add", help="Create an event")
    _add_event_fields(sp_add, require=True)

    sp_edit = ev_sub.add_parser("edit", help="Change fields of an event")
    sp_edit.add_argument("id", type=int)
    _add_event_fields(sp_edit, require=False)

    sp_remove = ev_sub.add_parser("remove", help="Delete an event")
    sp_remove.add_argument("id", type=int)

    sp_upload = ev_sub.add_parser("upload", help="Upload a flyer image and print its URL")
    sp_upload.add_argument("file")

    args = parser.parse_args()
    cfg = cfg_module.load(Path(args.config))

    if args.command == "serve":
        _serve(args, cfg)
    elif args.command == "build":
        _build(args, cfg)
    elif args.command == "init-db":
        _init_db(args, cfg)
    elif args.command == "events":
        handlers = {
            "list": _events_list,
            "add": _events_add,
            "edit": _events_edit,
            "remove": _events_remove,
            "upload": _events_upload,
        }
        try:
            handlers[args.events_command](args, cfg)
        except ClientError as exc:
            print(f"Error: {exc.message}", file=sys.stderr)
            sys.exit(1)


if __name__ == "__main__":
    main()

from hexnav import config
from hexnav.hexgrid import HexCoordinate, WorldPosition
from hexnav.pathfinding import find_path, path_length
from hexnav.render_ascii import render_map_ascii
from scenarios.simple_scenario import build_session


def run_repl(session, input_fn=input):
    print("Hex Navigation Shell")
    print("Type 'help' for commands. Type 'exit' to quit.\n")

    while True:
        try:
            raw = input_fn(f"[Boat {session.boat.current_hex}]> ").strip()
        except EOFError:
            break
        cmd = raw.lower()

        if cmd in ("quit", "exit"):
            break

        elif cmd == "help":
            print("Commands:")
            print("  map                         - show ascii map with the last path")
            print("  where                       - show the boat's hex, offset and world position")
            print("  path <q> <r> <q2> <r2>      - compute a path between two hexes")
            print("  goto <q> <r>                - route the boat to a hex and move it there")
            print("  click <x> <y>               - click an offset cell (odd rows shifted)")
            print("  block <q> <r>               - place an obstacle")
            print("  unblock <q> <r>             - remove an obstacle")
            print("  hex <x> <z>                 - resolve a world position to a hex")
            print("  hexsize                     - show the map's hex size")

        elif cmd == "map":
            print(render_map_ascii(session.grid, session.last_path, session.boat))

        elif cmd == "where":
            b = session.boat
            print(f"Boat at {b.current_hex} offset {b.current_hex.to_offset()} world {tuple(round(v, 3) for v in b.position)}")

        elif cmd.startswith("path "):
            handle_path(session, raw)

        elif cmd.startswith("goto "):
            handle_goto(session, raw)

        elif cmd.startswith("click "):
            handle_click(session, raw)

        elif cmd.startswith("block "):
            handle_block(session, raw, obstacle=True)

        elif cmd.startswith("unblock "):
            handle_block(session, raw, obstacle=False)

        elif cmd.startswith("hex "):
            handle_hex(session, raw)

        elif cmd == "hexsize":
            print(f"Hex size: {session.grid.get_hex_size():g}")

        elif not cmd:
            continue

        else:
            print("Unknown command")


def _ints(parts, n):
    if len(parts) != n:
        return None
    try:
        return [int(p) for p in parts]
    except ValueError:
        return None


def handle_path(session, cmd: str) -> None:
    nums = _ints(cmd.split()[1:], 4)
    if nums is None:
        print("Usage: path <q> <r> <q2> <r2>")
        return

    start, goal = HexCoordinate(nums[0], nums[1]), HexCoordinate(nums[2], nums[3])
    path = find_path(session.grid, start, goal)
    if not path:
        print("No path.")
        return
    session.last_path = path
    print("Path:", " -> ".join(str(h) for h in path))
    print(f"Steps: {path_length(path)}")


def handle_goto(session, cmd: str) -> None:
    nums = _ints(cmd.split()[1:], 2)
    if nums is None:
        print("Usage: goto <q> <r>")
        return
    _, msg = session.go_to(HexCoordinate(*nums))
    print(msg)


def handle_click(session, cmd: str) -> None:
    nums = _ints(cmd.split()[1:], 2)
    if nums is None:
        print("Usage: click <x> <y>")
        return
    path = session.click_offset(*nums)
    if not path:
        print("No valid path.")
        return
    session.finish()
    print("Path:", " -> ".join(str(h) for h in path))


def handle_block(session, cmd: str, obstacle: bool) -> None:
    nums = _ints(cmd.split()[1:], 2)
    if nums is None:
        print(f"Usage: {'block' if obstacle else 'unblock'} <q> <r>")
        return
    h = HexCoordinate(*nums)
    if not session.grid.set_obstacle(h, obstacle):
        print(f"{h} is not on the map.")
        return
    print(f"{'Blocked' if obstacle else 'Unblocked'} {h}")


def handle_hex(session, cmd: str) -> None:
    parts = cmd.split()[1:]
    if len(parts) != 2:
        print("Usage: hex <x> <z>")
        return
    try:
        x, z = float(parts[0]), float(parts[1])
    except ValueError:
        print("x and z must be numbers.")
        return
    h = session.grid.world_to_hex(WorldPosition(x, 0.0, z))
    print(f"{h} offset {h.to_offset()}")


def main():
    config.setup_logging()
    run_repl(build_session())


if __name__ == "__main__":
    main()

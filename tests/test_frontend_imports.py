import os
import subprocess
import sys

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

CHECK = (
    "import sys\n"
    "import frontend.http_client, frontend.workspace\n"
    "loaded = sorted(m for m in ('fastapi', 'starlette') if m in sys.modules)\n"
    "print(','.join(loaded))\n"
)


def test_frontend_does_not_load_server_stack():
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(p for p in (ROOT, env.get("PYTHONPATH")) if p)

    out = subprocess.run(
        [sys.executable, "-c", CHECK],
        cwd=ROOT,
        env=env,
        capture_output=True,
        text=True,
        check=True,
    )
    assert out.stdout.strip() == ""

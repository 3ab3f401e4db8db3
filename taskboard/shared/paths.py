import os


def find_repo_root(start_dir):
    cur = os.path.abspath(start_dir)
    for _ in range(6):
        if os.path.isdir(os.path.join(cur, ".git")):
            return cur
        if os.path.isfile(os.path.join(cur, "pyproject.toml")):
            return cur
        parent = os.path.dirname(cur)
        if parent == cur:
            break
        cur = parent
    return os.path.abspath(start_dir)


def default_tasks_path(repo_root):
    env_path = os.environ.get("TASKBOARD_TASKS")
    if env_path:
        return env_path
    return os.path.join(repo_root, "data", "tasks.json")


def default_theme_path(repo_root):
    env_path = os.environ.get("TASKBOARD_THEME")
    if env_path:
        return env_path
    return os.path.join(repo_root, "board_theme.json")

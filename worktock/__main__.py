from worktock.main import run

run()

#!/usr/bin/env python3
"""
insights - Project analytics: counts, branches, file types, activity, size.
"""

from gitctrl import inspector
from gitctrl.output import bold, cyan, green
from gitctrl.session import Session


def print_file_types(paths):
    top = inspector.analyze_file_types(paths)
    if not top:
        return
    print("📂 File types:")
    for ext, count in top:
        print(f"  • {ext}: {count} files")
    print()


def project_insights(session: Session):
    print(f"📊 === {bold('PROJECT INSIGHTS')} ===")

    commits, files, branches = inspector.repo_stats(session)
    print("📈 Statistics:")
    print(f"  • {green(str(commits))} commits in total")
    print(f"  • {green(str(files))} tracked files")
    print(f"  • {green(str(branches))} branches\n")

    print(f"🌿 {cyan('Branches')}:")
    branch_lines = inspector.list_branches(session)
    if branch_lines:
        for is_current, line in branch_lines:
            if is_current:
                print(f"  → {green(line)} {cyan('(current branch)')}")
            else:
                print(f"  • {line}")
    else:
        print("  No branches found")
    print()

    print_file_types(inspector.tracked_files(session))

    since = session.config.get("recent_activity_since", "1.week.ago")
    recent = inspector.recent_commit_count(session, since)
    print(f"⚡ Recent activity: {green(str(recent))} commits since {since}")

    size = inspector.repository_size(session)
    if size:
        print(f"💾 Size: {green(size)}")

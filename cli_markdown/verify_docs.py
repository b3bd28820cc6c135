"""
Verify a generated command-line help document.
Checks for:
- Table-of-contents links without a matching section heading
- Headings that share an anchor (command names colliding across levels)
- Unclosed code blocks
"""

import re
from typing import List, Tuple

from .transform_to_markdown import anchor


TOC_LINK_PATTERN = re.compile(r'^\* \[`(.+)`↴\]\(#(.*)\)$')
HEADING_PATTERN = re.compile(r'^## `(.+)`$')


class DocVerifier:
    def __init__(self, file_path: str):
        self.file_path = file_path
        self.lines: List[str] = []
        self.issues: List[Tuple[int, str, str]] = []

    def load_file(self):
        """Load the documentation file."""
        with open(self.file_path, 'r', encoding='utf-8') as f:
            self.lines = f.read().splitlines()

    def heading_anchors(self) -> List[Tuple[int, str]]:
        anchors = []
        for i, line in enumerate(self.lines, start=1):
            match = HEADING_PATTERN.match(line)
            if match:
                anchors.append((i, anchor(tuple(match.group(1).split(' ')))))
        return anchors

    def check_toc_links(self):
        """Check every table-of-contents link targets an existing heading."""
        targets = {target for _, target in self.heading_anchors()}

        for i, line in enumerate(self.lines, start=1):
            match = TOC_LINK_PATTERN.match(line)
            if match and match.group(2) not in targets:
                self.issues.append((i, 'ERROR', f'Broken link to #{match.group(2)} for `{match.group(1)}`'))

    def check_duplicate_anchors(self):
        """Check that no two headings resolve to the same anchor."""
        seen = {}
        for i, target in self.heading_anchors():
            if target in seen:
                self.issues.append((i, 'WARNING', f'Anchor #{target} already used by the heading at line {seen[target]}'))
            else:
                seen[target] = i

    def check_code_blocks(self):
        """Check that all code blocks are properly closed."""
        in_code_block = False
        code_block_start = 0

        for i, line in enumerate(self.lines, start=1):
            if line.strip().startswith('```'):
                if in_code_block:
                    in_code_block = False
                else:
                    in_code_block = True
                    code_block_start = i

        if in_code_block:
            self.issues.append((code_block_start, 'ERROR', f'Unclosed code block starting at line {code_block_start}'))

    def verify_all(self) -> bool:
        """Run all verification checks."""
        print(f"Verifying {self.file_path}...")
        print()

        self.load_file()

        self.check_toc_links()
        self.check_duplicate_anchors()
        self.check_code_blocks()

        return self.report()

    def report(self) -> bool:
        """Print verification report and return True if no errors."""
        if not self.issues:
            print("All checks passed.")
            return True

        self.issues.sort(key=lambda x: x[0])

        errors = [i for i in self.issues if i[1] == 'ERROR']
        warnings = [i for i in self.issues if i[1] == 'WARNING']

        print(f"Found {len(self.issues)} issues:")
        print(f"  - {len(errors)} ERRORS")
        print(f"  - {len(warnings)} WARNINGS")
        print()

        for title, group in (("ERRORS (must fix):", errors), ("WARNINGS (should review):", warnings)):
            if group:
                print("=" * 80)
                print(title)
                print("=" * 80)
                for line, severity, message in group:
                    print(f"Line {line}: {message}")
                print()

        return len(errors) == 0

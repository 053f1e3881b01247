"""Strip escape sequences from a string — zero config, zero deps."""

from ansistrip import strip

colored = "\x1b[1;31merror:\x1b[0m file not found"
print(strip(colored))

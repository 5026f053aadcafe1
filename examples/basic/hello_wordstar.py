"""Parse a WordStar snippet and walk its events."""

from wsmark import Heading, TextLine, parse

doc = parse(".he Hello\r\n\x02Bold\x02 and plain\r\n\x1a")
for event in doc:
    match event:
        case Heading(level=level, text=text):
            print("heading", level, text)
        case TextLine(runs=runs):
            for run in runs:
                print(run.modifier, repr(run.text))

import json

from constants import MEET_BASE_URL

# Invoked with the room, the registry origin and the meeting origin as JSON string literals.
SCRIPT_TEMPLATE = """
javascript:(async function(room, host, meet) {
    if (typeof room !== 'string' || room.length === 0) {
        return alert('invalid room name');
    }
    if (location.origin !== meet) {
        return alert(`script must be run on ${meet}`);
    }
    const go = (code) => location.href = `${meet}/${code}${location.search}`;
    let resp = await fetch(`${host}/${encodeURIComponent(room)}/code`);
    if (resp.ok) {
        return go(await resp.text());
    }
    if (resp.status !== 404) {
        return alert(`error ${resp.status}: ${resp.statusText || 'unknown'}`);
    }
    const createButton = document.querySelector('li[aria-label="Create a meeting for later"]')
                      ?? document.querySelector('li.VfPpkd-rymPhb-ibnC6b');
    if (createButton === null) {
        return alert('could not find the create meeting button');
    }
    createButton.click();
    let meetingCode;
    for (let i = 0; i < 20 && meetingCode === undefined; i++) {
        await new Promise((resolve) => setTimeout(resolve, 100));
        const codeBox = document.querySelector('div.Hayy8b');
        const match = codeBox && /[a-z]{3}-[a-z]{4}-[a-z]{3}/.exec(codeBox.textContent);
        if (match) {
            meetingCode = match[0];
        }
    }
    if (meetingCode === undefined) {
        return alert('could not find meeting code in page');
    }
    resp = await fetch(`${host}/${encodeURIComponent(room)}/code/${meetingCode}`, { method: 'POST' });
    if (!resp.ok) {
        return alert(`error ${resp.status}: ${resp.statusText || 'unknown'}`);
    }
    return go(await resp.text());
})
"""


def render_script(room: str, host: str) -> str:
    """Render the bookmarklet that joins or creates the meeting of `room`.

    The result is a single line so it can be pasted as a bookmark URL.
    """
    script = "".join(line.strip() for line in SCRIPT_TEMPLATE.splitlines())
    args = ", ".join(json.dumps(arg) for arg in (room, f"https://{host}", MEET_BASE_URL))
    return f"{script}({args})"

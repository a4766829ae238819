"""Fixed folders, tags and notes loaded by `python -m noteful.seed`."""

FOLDERS = [
    {"id": "111111111111111111111100", "name": "Archive"},
    {"id": "111111111111111111111101", "name": "Drafts"},
    {"id": "111111111111111111111102", "name": "Personal"},
    {"id": "111111111111111111111103", "name": "Work"},
]

TAGS = [
    {"id": "222222222222222222222200", "name": "breed"},
    {"id": "222222222222222222222201", "name": "hybrid"},
    {"id": "222222222222222222222202", "name": "domestic"},
    {"id": "222222222222222222222203", "name": "feral"},
]

NOTES = [
    {
        "id": "000000000000000000000000",
        "title": "5 life lessons learned from cats",
        "content": "Lorem ipsum dolor sit amet, consectetur adipiscing elit.",
        "folder_id": "111111111111111111111100",
        "tags": ["222222222222222222222200"],
    },
    {
        "id": "000000000000000000000001",
        "title": "What the government doesn't want you to know about cats",
        "content": "Posuere sollicitudin aliquam ultrices sagittis orci a.",
        "folder_id": "111111111111111111111101",
        "tags": ["222222222222222222222200", "222222222222222222222201"],
    },
    {
        "id": "000000000000000000000002",
        "title": "The most boring article about cats you'll ever read",
        "content": "Tellus in metus vulputate eu scelerisque felis imperdiet.",
        "folder_id": "111111111111111111111101",
        "tags": ["222222222222222222222202"],
    },
    {
        "id": "000000000000000000000003",
        "title": "7 things lady gaga has in common with cats",
        "content": "Porttitor massa id neque aliquam vestibulum morbi blandit.",
        "folder_id": "111111111111111111111102",
        "tags": ["222222222222222222222202", "222222222222222222222203"],
    },
    {
        "id": "000000000000000000000004",
        "title": "The most incredible article about cats you'll ever read",
        "content": "Lorem ipsum dolor sit amet, boring consectetur adipiscing elit.",
        "folder_id": "111111111111111111111103",
        "tags": None,
    },
    {
        "id": "000000000000000000000005",
        "title": "10 ways cats can help you live to 100",
        "content": None,
        "folder_id": None,
        "tags": ["222222222222222222222203"],
    },
]

SAMPLES = [
    # No text
    (
        "<p><b></b><i></i></p><div><span></span></div>",
        [
            {"tag": "p", "children": [
                {"tag": "b"},
                {"tag": "i"},
            ]},
            {"tag": "div", "children": [
                {"tag": "span"},
            ]},
        ],
    ),
    # Just elements
    (
        "<p>\n\t<b>bold content</b>\n</p>",
        [{"tag": "p", "children": [
            {"text": "\n\t"},
            {"tag": "b", "children": [
                {"text": "bold content"},
            ]},
            {"text": "\n"},
        ]}],
    ),
    # An attribute
    (
        '<a href="https://google.com">Google</a>',
        [{"tag": "a", "attributes": {"href": "https://google.com"}, "children": [
            {"text": "Google"},
        ]}],
    ),
    # A comment
    (
        "<p>\n"
        "\tThe world turns,\n"
        "\tit turns and it turns.\n"
        "\tLike a world it turns,\n"
        "\t<!-- Pause for effect... -->\n"
        "\tthe world turns as a world would turn.\n"
        "</p>",
        [{"tag": "p", "children": [
            {"text": "\n\tThe world turns,\n\tit turns and it turns.\n"
                     "\tLike a world it turns,\n\t"},
            {"comment": " Pause for effect... "},
            {"text": "\n\tthe world turns as a world would turn.\n"},
        ]}],
    ),
    # Void tag
    (
        "<form>\n"
        '\t<label>Username: <input type="text"></label>\n'
        '\t<label>Password: <input type="password"></label>\n'
        "\t<button>Login</button>\n"
        "</form>",
        [{"tag": "form", "children": [
            {"text": "\n\t"},
            {"tag": "label", "children": [
                {"text": "Username: "},
                {"tag": "input", "attributes": {"type": "text"}},
            ]},
            {"text": "\n\t"},
            {"tag": "label", "children": [
                {"text": "Password: "},
                {"tag": "input", "attributes": {"type": "password"}},
            ]},
            {"text": "\n\t"},
            {"tag": "button", "children": [
                {"text": "Login"},
            ]},
            {"text": "\n"},
        ]}],
    ),
]

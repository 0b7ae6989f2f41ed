"""Root demo page: a translate form, plus a cache editor when the admin routes are on."""

from isp_translator.core.constants import MAX_TEXT_LENGTH

_FONTS_CSS_URL = (
    "https://fonts.googleapis.com/css2?family=DM+Sans:ital,opsz,wght@0,9..40,400;0,9..40,500;0,9..40,600;1,9..40,400"
    "&family=JetBrains+Mono:wght@400;500&display=swap"
)


def render_root_page(app_name: str, cache_admin_enabled: bool = False) -> str:
    """Return HTML for the root demo page.

    With cache_admin_enabled the page also carries an editor for stored
    translations (list, edit, delete, clear) backed by the /api/v1/cache routes.
    """
    editor = _CACHE_EDITOR_HTML if cache_admin_enabled else ""
    return f"""
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>ISP Translator</title>
    <link rel="preconnect" href="https://fonts.googleapis.com">
    <link rel="preconnect" href="https://fonts.gstatic.com" crossorigin>
    <link href="{_FONTS_CSS_URL}" rel="stylesheet">
    <style>
        * {{ box-sizing: border-box; }}
        body {{
            font-family: 'DM Sans', system-ui, sans-serif;
            margin: 0;
            min-height: 100vh;
            background: #000;
            color: #e0e0e0;
            padding: 2rem 1rem;
        }}
        .wrap {{
            max-width: 560px;
            margin: 0 auto;
        }}
        .hero {{
            text-align: center;
            margin-bottom: 2.5rem;
        }}
        .hero h1 {{
            font-size: clamp(2rem, 6vw, 2.5rem);
            font-weight: 600;
            letter-spacing: -0.02em;
            margin: 0 0 0.5rem 0;
            color: #fff;
        }}
        .hero .tagline {{
            color: #888;
            font-size: 1rem;
        }}
        .card {{
            background: #0c0c0c;
            border: 1px solid #1a1a1a;
            padding: 1.5rem 1.75rem;
            margin-bottom: 1.25rem;
        }}
        .card h2 {{
            font-size: 0.75rem;
            font-weight: 600;
            text-transform: uppercase;
            letter-spacing: 0.08em;
            color: #666;
            margin: 0 0 1rem 0;
        }}
        label {{
            display: block;
            color: #999;
            font-size: 0.875rem;
            margin: 0.75rem 0 0.35rem 0;
        }}
        input {{
            width: 100%;
            padding: 0.6rem 0.75rem;
            background: #111;
            color: #e0e0e0;
            border: 1px solid #333;
            font-family: 'JetBrains Mono', monospace;
            font-size: 0.875rem;
        }}
        .counter {{
            text-align: right;
            color: #555;
            font-size: 0.75rem;
            margin-top: 0.25rem;
        }}
        button {{
            margin-top: 1.25rem;
            padding: 0.65rem 1.25rem;
            background: #fff;
            color: #000;
            border: 1px solid #fff;
            font-weight: 500;
            font-size: 0.9375rem;
            cursor: pointer;
        }}
        button:disabled {{
            background: #333;
            border-color: #333;
            color: #777;
            cursor: default;
        }}
        .code {{
            font-family: 'JetBrains Mono', monospace;
            font-size: 0.8125rem;
            background: #111;
            color: #b0b0b0;
            padding: 0.6rem 0.85rem;
            border: 1px solid #1a1a1a;
            white-space: pre-wrap;
            word-break: break-all;
            min-height: 2.5rem;
        }}
        .status {{
            color: #888;
            font-size: 0.8125rem;
            margin-bottom: 0.5rem;
        }}
        .error {{
            color: #e06c6c;
        }}
        .foot {{
            text-align: center;
            margin-top: 2.5rem;
            color: #444;
            font-size: 0.8125rem;
        }}
        .foot a {{
            color: #777;
        }}
        table {{
            width: 100%;
            border-collapse: collapse;
            font-size: 0.8125rem;
        }}
        td {{
            padding: 0.35rem 0.25rem;
            border-bottom: 1px solid #1a1a1a;
            vertical-align: middle;
        }}
        td.key {{
            font-family: 'JetBrains Mono', monospace;
            color: #777;
        }}
        button.small {{
            margin-top: 0;
            padding: 0.3rem 0.6rem;
            font-size: 0.75rem;
        }}
        button.ghost {{
            background: #222;
            color: #e0e0e0;
            border-color: #333;
        }}
    </style>
</head>
<body>
    <div class="wrap">
        <header class="hero">
            <h1>ISP Translator</h1>
            <p class="tagline">Localized internet provider names, cached at the edge.</p>
        </header>

        <section class="card" aria-labelledby="try-heading">
            <h2 id="try-heading">Try it</h2>
            <form id="translate-form">
                <label for="token">API token</label>
                <input id="token" type="password" autocomplete="off" required>
                <label for="text">ISP name</label>
                <input id="text" type="text" maxlength="{MAX_TEXT_LENGTH}" placeholder="China Telecom" required>
                <div class="counter"><span id="text-count">0</span>/{MAX_TEXT_LENGTH}</div>
                <label for="locale">Locale</label>
                <input id="locale" type="text" placeholder="zh-CN" required>
                <button id="submit" type="submit">Translate</button>
            </form>
        </section>

        <section class="card" aria-labelledby="result-heading">
            <h2 id="result-heading">Result</h2>
            <div class="status" id="status">No request yet.</div>
            <div class="code" id="result"></div>
        </section>

{editor}

        <footer class="foot">
            {app_name} · API at <code>/api/v1</code> · <a href="/docs">docs</a>
        </footer>
    </div>
    <script>
        (function () {{
            var form = document.getElementById('translate-form');
            var token = document.getElementById('token');
            var text = document.getElementById('text');
            var locale = document.getElementById('locale');
            var count = document.getElementById('text-count');
            var submit = document.getElementById('submit');
            var status = document.getElementById('status');
            var result = document.getElementById('result');

            token.value = window.localStorage.getItem('isp-translator-token') || '';
            text.addEventListener('input', function () {{
                count.textContent = text.value.length;
            }});

            form.addEventListener('submit', function (ev) {{
                ev.preventDefault();
                window.localStorage.setItem('isp-translator-token', token.value);
                submit.disabled = true;
                status.textContent = 'Translating...';
                status.className = 'status';
                var started = performance.now();
                fetch('/api/v1/translate', {{
                    method: 'POST',
                    headers: {{
                        'Content-Type': 'application/json',
                        'Authorization': token.value
                    }},
                    body: JSON.stringify({{ text: text.value, locale: locale.value }})
                }}).then(function (res) {{
                    var cacheStatus = res.headers.get('X-Cache-Status') || '-';
                    return res.json().then(function (body) {{
                        var ms = Math.round(performance.now() - started);
                        status.textContent = 'HTTP ' + res.status + ' · ' + cacheStatus + ' · ' + ms + ' ms';
                        if (!res.ok) status.className = 'status error';
                        result.textContent = JSON.stringify(body, null, 2);
                    }});
                }}).catch(function (err) {{
                    status.textContent = 'Request failed';
                    status.className = 'status error';
                    result.textContent = String(err);
                }}).finally(function () {{
                    submit.disabled = false;
                }});
            }});
        }})();
    </script>
</body>
</html>
""".strip()


# Plain string (not an f-string): inserted into the page only when the admin routes are on.
_CACHE_EDITOR_HTML = """
        <section class="card" aria-labelledby="editor-heading">
            <h2 id="editor-heading">Cache editor</h2>
            <div class="status" id="editor-status">Uses the API token above.</div>
            <button id="editor-load" type="button" class="small ghost">Load entries</button>
            <button id="editor-clear" type="button" class="small ghost">Clear all</button>
            <table><tbody id="editor-rows"></tbody></table>
        </section>
        <script>
        (function () {
            var rows = document.getElementById('editor-rows');
            var status = document.getElementById('editor-status');

            function call(method, path, body) {
                var opts = {
                    method: method,
                    headers: {
                        'Content-Type': 'application/json',
                        'Authorization': document.getElementById('token').value
                    }
                };
                if (body) opts.body = JSON.stringify(body);
                return fetch('/api/v1/cache' + path, opts).then(function (res) {
                    return res.json().then(function (data) {
                        if (!res.ok) throw new Error('HTTP ' + res.status + ' ' + (data.message || ''));
                        return data;
                    });
                });
            }

            function fail(err) {
                status.textContent = String(err);
                status.className = 'status error';
            }

            function row(entry) {
                var tr = document.createElement('tr');
                var key = document.createElement('td');
                key.className = 'key';
                key.textContent = entry.cache_key.slice(0, 8);
                key.title = entry.cache_key;
                var textCell = document.createElement('td');
                var input = document.createElement('input');
                input.maxLength = 64;
                input.value = entry.translated_text;
                textCell.appendChild(input);
                var actions = document.createElement('td');
                var save = document.createElement('button');
                save.className = 'small';
                save.textContent = 'Save';
                save.onclick = function () {
                    call('POST', '/update', { key: entry.cache_key, text: input.value })
                        .then(function () { status.textContent = 'Saved ' + entry.cache_key; })
                        .catch(fail);
                };
                var del = document.createElement('button');
                del.className = 'small ghost';
                del.textContent = 'Delete';
                del.onclick = function () {
                    call('POST', '/delete', { key: entry.cache_key })
                        .then(function () { tr.remove(); })
                        .catch(fail);
                };
                actions.appendChild(save);
                actions.appendChild(del);
                tr.appendChild(key);
                tr.appendChild(textCell);
                tr.appendChild(actions);
                return tr;
            }

            function load() {
                call('GET', '').then(function (entries) {
                    rows.innerHTML = '';
                    entries.forEach(function (entry) { rows.appendChild(row(entry)); });
                    status.textContent = entries.length + ' entries';
                    status.className = 'status';
                }).catch(fail);
            }

            document.getElementById('editor-load').onclick = load;
            document.getElementById('editor-clear').onclick = function () {
                if (!window.confirm('Delete every stored translation?')) return;
                call('POST', '/clear').then(load).catch(fail);
            };
        })();
        </script>
"""

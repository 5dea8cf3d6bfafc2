from __future__ import annotations

from hypothesis import strategies as st


@st.composite
def path_strategy(draw: st.DrawFn) -> str:
    return draw(st.from_regex(r"/[a-z0-9][a-z0-9/_-]{0,40}", fullmatch=True))


@st.composite
def loc_strategy(draw: st.DrawFn) -> str:
    scheme = draw(st.sampled_from(["http", "https"]))
    host = draw(st.from_regex(r"[a-z0-9]([a-z0-9-]{0,20}[a-z0-9])?", fullmatch=True))
    tld = draw(st.sampled_from(["com", "org", "net", "io", "dev"]))
    path = draw(path_strategy())
    return f"{scheme}://{host}.{tld}{path}"

from textual.widget import Widget

def titled(
    w: Widget, /, title: str, subtitle: str | None = None,
    skip_bottom: bool = True, style = ('round', '#999'), padding = (0, 1),
):
    '''
    `subtitle` sits on the bottom border, so it needs `skip_bottom=False`.
    '''
    w.styles.border = style
    if skip_bottom:
        w.styles.border_bottom = None
    w.border_title = title
    if subtitle is not None:
        assert not skip_bottom
        w.border_subtitle = subtitle
    w.styles.padding = padding
    return w

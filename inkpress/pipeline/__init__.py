"""
Post pipeline stages.

    header    -> parse_header(stream, date_format)
    render    -> render(body)
    highlight -> highlight(html)
    images    -> collect(post_dir), copy_images(source, destination)
    assemble  -> assemble(post_dir, date_format)
    generate  -> generate_post(post, destination, writer)
"""

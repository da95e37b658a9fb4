"""Terminal interface pieces: key chords and sequences, key maps and bindings, events and the key handler."""